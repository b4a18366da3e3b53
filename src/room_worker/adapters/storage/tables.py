"""Table definitions for the room store.

Column names follow the Prisma schema that owns the table, so they are camelCase.
Schema creation and migrations are managed elsewhere; ``metadata.create_all``
is only used by tests and local setups.
"""

from sqlalchemy import Column, Integer, MetaData, String, Table


def build_rooms_table(name: str = "Room", metadata: MetaData | None = None) -> Table:
    """Build the rooms table definition under the given table name."""
    return Table(
        name,
        metadata if metadata is not None else MetaData(),
        Column("id", String, primary_key=True),
        Column("participantCount", Integer, nullable=False, default=0),
        Column("listenerCount", Integer, nullable=False, default=0),
    )
