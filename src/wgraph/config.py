import logging
from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(RuntimeError):
    """Configuration-related error."""
    pass


# ─────────────────────────────────────────────────────────────
# Section configs
# ─────────────────────────────────────────────────────────────


class LoggingSettings(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    format: str = "%(asctime)-20s %(name)-30s %(levelname)-8s: %(message)s"


class GraphSettings(BaseModel):
    representation: Literal["edges", "adjacency"] = Field(
        "adjacency",
        description="Representation used by create_graph() when none is named.",
    )
    check_invariants: bool = Field(
        True,
        description=(
            "Run the representation checks after every mutation. "
            "The checks are assertions and are also skipped under `python -O`."
        ),
    )


# ─────────────────────────────────────────────────────────────
# Top-level settings
# ─────────────────────────────────────────────────────────────


class AppSettings(BaseSettings):
    """
    Canonical configuration for wgraph.

    Precedence (highest → lowest):

    1. Init kwargs (tests/overrides)
    2. Environment variables
    3. .env and .env.local
    4. Defaults in this class
    """

    model_config = SettingsConfigDict(
        env_prefix="WGRAPH_",  # WGRAPH_LOGGING__LEVEL, WGRAPH_GRAPH__REPRESENTATION, ...
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(False, description="Force DEBUG logging regardless of logging.level.")

    logging: LoggingSettings = LoggingSettings()
    graph: GraphSettings = GraphSettings()  # type: ignore[call-arg]


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """
    Cached accessor for process-wide settings.

    `overrides` are init kwargs → highest precedence. They must be hashable
    because the result is cached; build AppSettings directly for nested
    section overrides.
    """
    return AppSettings(**overrides)


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """
    Apply the logging section to the package logger.

    `debug=True` forces DEBUG whatever the configured level. Attaches a
    single StreamHandler to the ``wgraph`` logger; calling this again only
    updates level and format.
    """
    if settings is None:
        settings = get_settings()

    level = logging.getLevelName(settings.logging.level)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level {settings.logging.level!r}")
    if settings.debug:
        level = logging.DEBUG

    logger = logging.getLogger("wgraph")
    logger.setLevel(level)

    formatter = logging.Formatter(settings.logging.format)
    handler = next(
        (h for h in logger.handlers if getattr(h, "_wgraph_handler", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._wgraph_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    handler.setFormatter(formatter)
    return logger
