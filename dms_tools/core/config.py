"""Configuration management for dms-tools."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, Field, field_validator

from dms_tools.core.types import DEFAULT_BIT_RATE_MODE, BitRateMode

logger = structlog.get_logger()


class AppConfig(BaseModel):
    """Application configuration."""

    config_dir: Path = Field(
        default=Path.home() / ".config" / "dms-tools",
        description="Configuration directory"
    )

    # Media settings
    default_bit_rate_mode: BitRateMode = Field(
        default=DEFAULT_BIT_RATE_MODE,
        description="Bit rate mode assumed when a stream does not report one"
    )
    expirable_ttl: int = Field(
        default=86400,  # 24 hours
        description="Lifetime of expiring cached values in seconds"
    )

    # Output settings
    output_format: str = Field(
        default="rich",
        description="Output format (rich, json, plain)"
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @classmethod
    def load(cls, config_file: Path | None = None) -> AppConfig:
        """Load configuration from file.

        Args:
            config_file: Path to config file, uses default if None

        Returns:
            Application configuration
        """
        if config_file is None:
            config_file = Path.home() / ".config" / "dms-tools" / "config.json"

        if config_file.exists():
            with open(config_file) as f:
                data = json.load(f)
                return cls(**data)

        # Return defaults
        return cls()

    def save(self, config_file: Path | None = None) -> None:
        """Save configuration to file.

        Args:
            config_file: Path to config file, uses default if None
        """
        if config_file is None:
            config_file = self.config_dir / "config.json"

        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, default=str)

        logger.info("config_saved", path=str(config_file))

    @field_validator("default_bit_rate_mode", mode="before")
    @classmethod
    def validate_default_bit_rate_mode(cls, v: Any) -> BitRateMode:
        """Accept any label BitRateMode.parse understands."""
        if isinstance(v, BitRateMode):
            return v
        mode = BitRateMode.parse(v) if isinstance(v, str) else None
        if mode is None:
            raise ValueError(f"Invalid bit rate mode: {v!r}. Valid modes: CBR, VBR, Constant, Variable")
        return mode

    @field_validator("expirable_ttl")
    @classmethod
    def validate_expirable_ttl(cls, v: int) -> int:
        """Validate TTL value."""
        if v < 0:
            raise ValueError("Expirable TTL must be non-negative")
        return v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format."""
        valid_formats = {"rich", "json", "plain"}
        if v not in valid_formats:
            raise ValueError(f"Invalid output format: {v}. Valid formats: {valid_formats}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Valid levels: {valid_levels}")
        return v
