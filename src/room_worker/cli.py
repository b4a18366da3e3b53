"""Command line interface for the room worker."""

import asyncio
import json
import sys

from room_worker.adapters.config import AppConfig
from room_worker.adapters.livekit_api import LivekitEgressRepository, LivekitRoomRepository
from room_worker.application.services import LiveRoomCollector
from room_worker.domain.errors import CollectorUnavailableError, ConfigurationError
from room_worker.domain.models import RoomSnapshot
from room_worker.main import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_FAILURE,
    configure_logging,
    livekit_client,
)
from room_worker.main import main as run_main


def format_rooms(rooms: list[RoomSnapshot], as_json: bool = False) -> str:
    """Render collected rooms for the terminal."""
    if as_json:
        return json.dumps(
            [
                {
                    "name": room.name,
                    "participant_count": room.participant_count,
                    "media_type": room.media_type.value,
                }
                for room in rooms
            ],
            indent=2,
        )
    if not rooms:
        return "No live rooms."
    lines = [f"Found {len(rooms)} live room(s):"]
    lines.extend(f"  {room.name}: {room.participant_count} participant(s)" for room in rooms)
    lines.append(f"Total participants: {sum(room.participant_count for room in rooms)}")
    return "\n".join(lines)


async def list_rooms(config: AppConfig, as_json: bool = False) -> None:
    async with livekit_client(config) as lk:
        rooms = await LiveRoomCollector(LivekitRoomRepository(lk)).collect_live_rooms()
    print(format_rooms(rooms, as_json=as_json))


async def show_egress(config: AppConfig) -> None:
    async with livekit_client(config) as lk:
        count = await LivekitEgressRepository(lk).count_active_egress()
    print(f"Number of active egresses: {count}")


async def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Report live room participant and listener counts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Update the stored counts once (default)
  room-worker run

  # Show live rooms without touching the store
  room-worker rooms --json

  # Show the number of active egresses
  room-worker egress
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    subparsers.add_parser("run", help="Update stored room counts once")
    rooms_parser = subparsers.add_parser("rooms", help="List live rooms")
    rooms_parser.add_argument("--json", action="store_true", help="Output as JSON")
    subparsers.add_parser("egress", help="Show the number of active egresses")

    args = parser.parse_args(argv)

    if args.command in (None, "run"):
        return await run_main()

    try:
        config = AppConfig()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR
    configure_logging(config.log_level)

    try:
        if args.command == "rooms":
            await list_rooms(config, as_json=args.json)
        elif args.command == "egress":
            await show_egress(config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR
    except CollectorUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(EXIT_FAILURE)
    sys.exit(exit_code)


if __name__ == "__main__":
    cli_main()
