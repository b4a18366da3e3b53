"""Shared pytest fixtures."""

import pytest

ROOM_WORKER_ENV_VARS = (
    "LIVEKIT_HOST",
    "LIVEKIT_API_KEY",
    "LIVEKIT_API_KEY_SECRET",
    "EMQX_HOST",
    "EMQX_PORT",
    "EMQX_SCHEME",
    "EMQX_API_KEY",
    "EMQX_API_SECRET",
    "LISTENER_TOPIC_TEMPLATE",
    "LISTENER_LOOKUP_TIMEOUT_SECONDS",
    "DATABASE_URL",
    "ROOMS_TABLE",
    "ROOM_STORE_MODE",
    "MAX_CONCURRENCY",
    "FAIL_ON_PARTIAL_FAILURE",
    "LOG_LEVEL",
    "RW_LOG_REQUESTS",
)


@pytest.fixture(autouse=True)
def clean_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Isolate tests from the developer's environment and any local .env file."""
    for name in ROOM_WORKER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def full_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set every variable a full run needs."""
    monkeypatch.setenv("LIVEKIT_HOST", "wss://livekit.example.com")
    monkeypatch.setenv("LIVEKIT_API_KEY", "lk-key")
    monkeypatch.setenv("LIVEKIT_API_KEY_SECRET", "lk-secret")
    monkeypatch.setenv("EMQX_HOST", "emqx.internal")
    monkeypatch.setenv("EMQX_API_KEY", "emqx-key")
    monkeypatch.setenv("EMQX_API_SECRET", "emqx-secret")
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://user:pw@db/rooms")
