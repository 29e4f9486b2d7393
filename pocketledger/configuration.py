"""Mini README: Centralised configuration for Pocket Ledger.

Structure:
    * LedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to find the data directory, decide how corrupt
    ledger files are treated, and pick the service host and port. Values can
    be overridden with ``POCKETLEDGER_*`` environment variables or a ``.env``
    file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class LedgerSettings(BaseSettings):
    """Runtime configuration for the ledger and its interfaces."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory where the persisted ledger is stored.",
    )
    reset_on_corrupt: bool = Field(
        False,
        description=(
            "Start with an empty ledger when stored data cannot be parsed instead"
            " of refusing to start. The corrupt file is overwritten on the next change."
        ),
    )
    currency_symbol: str = Field(
        "₹",
        description="Symbol prefixed to amounts on the dashboard and in the CLI.",
    )
    log_level: str = Field("INFO", description="Root logging level.")
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the dashboard service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the dashboard service exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "POCKETLEDGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories so ``~/ledger`` style values work."""

        return Path(value).expanduser().resolve()

    @validator("log_level")
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing for level names."""

        return value.strip().upper()


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
