import os
from dataclasses import dataclass
from typing import Optional


def _load_env_from_file(env_path: Optional[str] = None):
    """Seed os.environ from <project root>/.env, if there is one.

    Real environment values win; a key is only filled in when it is unset or
    empty. Lines are KEY=value, blank lines and #-comments are skipped, and
    surrounding quotes on the value are removed.
    """
    if env_path is None:
        env_path = os.path.join(os.path.dirname(__file__), "..", "..", ".env")
    if not os.path.isfile(env_path):
        return
    try:
        with open(env_path, encoding="utf-8") as fh:
            lines = fh.read().splitlines()
    except OSError:
        return
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith("#") or "=" not in entry:
            continue
        name, _, raw = entry.partition("=")
        name = name.strip()
        if name and not os.environ.get(name):
            os.environ[name] = raw.strip().strip("\"'")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup."""

    app_name: str = "public-people-api"
    app_version: str = "0.1.0"
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: Optional[str] = None
    neo4j_database: Optional[str] = None
    neo4j_max_pool_size: int = 100
    cache_duration: int = 30
    log_level: str = "INFO"

    @property
    def cache_control_header(self) -> str:
        return f"max-age={self.cache_duration}, public"


def load_settings() -> Settings:
    """Build Settings from the environment, loading .env first and applying defaults."""
    _load_env_from_file()

    cache_duration = _int_env("CACHE_DURATION", 30)
    if cache_duration < 0:
        raise RuntimeError("CACHE_DURATION must not be negative")

    return Settings(
        app_name=os.getenv("APP_NAME") or "public-people-api",
        app_version=os.getenv("APP_VERSION") or "0.1.0",
        neo4j_uri=os.getenv("NEO4J_URI") or "bolt://localhost:7687",
        neo4j_user=os.getenv("NEO4J_USER") or "neo4j",
        neo4j_password=os.getenv("NEO4J_PASSWORD") or None,
        neo4j_database=os.getenv("NEO4J_DATABASE") or None,
        neo4j_max_pool_size=_int_env("NEO4J_MAX_POOL_SIZE", 100),
        cache_duration=cache_duration,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
