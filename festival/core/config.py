from os import environ

from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str
    port: int
    log_level: str
    static_dir: str
    cors_origins: list[str]
    lock_backend: str
    lock_name: str
    lock_timeout: float
    lock_blocking_timeout: float


_cached_settings: Settings | None = None


def _reset_settings() -> None:
    """Reset cached settings — for testing only."""
    global _cached_settings
    _cached_settings = None


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_settings() -> Settings:
    global _cached_settings
    if _cached_settings is not None:
        return _cached_settings

    _cached_settings = Settings(
        host=environ.get("HOST", "0.0.0.0"),
        port=int(environ.get("PORT", "3000")),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        static_dir=environ.get("STATIC_DIR", "public"),
        cors_origins=_split_origins(environ.get("CORS_ORIGINS", "*")),
        lock_backend=environ.get("LOCK_BACKEND", "local").lower(),
        lock_name=environ.get("LOCK_NAME", "festival:store"),
        lock_timeout=float(environ.get("LOCK_TIMEOUT", "10")),
        lock_blocking_timeout=float(environ.get("LOCK_BLOCKING_TIMEOUT", "5")),
    )
    return _cached_settings
