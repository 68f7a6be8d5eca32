"""Configuration management for ogkit.

Loads settings from ~/.ogkit/config.toml with environment variable overrides.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from dataclasses import fields as dataclass_fields
from pathlib import Path

import structlog

from ogkit.errors import ConfigError

logger = structlog.get_logger()

# Default paths
DEFAULT_DATA_DIR = Path.home() / ".ogkit"
DEFAULT_CONFIG_PATH = DEFAULT_DATA_DIR / "config.toml"

# Maximum response body size (10 MB)
MAX_RESPONSE_BYTES: int = 10 * 1024 * 1024


@dataclass(frozen=True)
class ConsumerConfig:
    """Open Graph extraction behavior."""

    fallback_mode: bool = False  # fill title/description/url from plain HTML
    strict_mode: bool = False  # raise on orphaned/invalid properties


@dataclass(frozen=True)
class FetchConfig:
    """HTTP client settings for ``load_url``."""

    user_agent: str = "ogkit/0.1 (+https://ogp.me)"
    timeout: float = 30.0  # seconds
    follow_redirects: bool = True
    max_response_bytes: int = MAX_RESPONSE_BYTES


@dataclass(frozen=True)
class PublisherConfig:
    """Meta tag rendering settings."""

    doctype: str = "html5"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "info"


@dataclass(frozen=True)
class Config:
    """Root configuration container."""

    consumer: ConsumerConfig = field(default_factory=ConsumerConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    publisher: PublisherConfig = field(default_factory=PublisherConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _env_override(section: str, key: str) -> str | None:
    """Check for OGKIT_{SECTION}_{KEY} environment variable."""
    env_key = f"OGKIT_{section.upper()}_{key.upper()}"
    return os.environ.get(env_key)


def _coerce(value: str, target_type: type) -> object:
    """Coerce a string value to the target type."""
    if target_type is bool:
        return value.lower() in ("true", "1", "yes")
    if target_type is int:
        return int(value)
    if target_type is float:
        return float(value)
    return value


# Configuration value constraints
_VALUE_CONSTRAINTS: dict[str, tuple[float, float]] = {
    "timeout": (0.1, 600.0),
    "max_response_bytes": (1024, 1024 * 1024 * 1024),
}

# Allowed values for string enums
_ALLOWED_VALUES: dict[str, frozenset[str]] = {
    "doctype": frozenset({"html5", "xhtml"}),
    "level": frozenset({"debug", "info", "warning", "error", "critical"}),
}

_FIELD_TYPES: dict[str, type] = {"bool": bool, "int": int, "float": float, "str": str}


def _validate_value(key: str, value: object) -> object:
    """Validate a config value against known constraints."""
    if (
        key in _VALUE_CONSTRAINTS
        and isinstance(value, (int, float))
        and not isinstance(value, bool)
    ):
        lo, hi = _VALUE_CONSTRAINTS[key]
        if not (lo <= value <= hi):
            logger.warning(
                "config_value_out_of_range",
                key=key,
                value=value,
                min=lo,
                max=hi,
            )
            # Clamp to valid range
            return type(value)(max(lo, min(hi, value)))
    if key in _ALLOWED_VALUES and isinstance(value, str):
        if value.lower() not in _ALLOWED_VALUES[key]:
            logger.warning(
                "config_invalid_value",
                key=key,
                value=value,
                allowed=sorted(_ALLOWED_VALUES[key]),
            )
            return None  # Will use default
        return value.lower()
    return value


def _build_section[T](
    cls: type[T], toml_section: dict[str, object], section_name: str
) -> T:
    """Build a dataclass instance from TOML data + env overrides."""
    kwargs: dict[str, object] = {}
    for f in dataclass_fields(cls):  # type: ignore[arg-type]
        # TOML value
        raw = toml_section.get(f.name)
        # env override
        env_val = _env_override(section_name, f.name)
        if env_val is not None:
            target = _FIELD_TYPES.get(str(f.type), type(f.default))
            try:
                raw = _coerce(env_val, target)
            except ValueError:
                logger.warning(
                    "config_invalid_env", section=section_name, key=f.name
                )
                continue
        if raw is not None:
            validated = _validate_value(f.name, raw)
            if validated is not None:
                kwargs[f.name] = validated
    return cls(**kwargs)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from TOML file with environment variable overrides.

    Priority: env vars > config.toml > defaults.

    Args:
        config_path: Path to config file. Defaults to ~/.ogkit/config.toml.

    Returns:
        Populated Config instance.

    Raises:
        ConfigError: If the file exists but is not valid TOML.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    raw: dict[str, object] = {}

    if path.exists():
        try:
            with open(path, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc
        logger.debug("config_loaded", path=str(path))
    else:
        logger.debug("config_default", path=str(path), reason="file not found")

    return Config(
        consumer=_build_section(ConsumerConfig, raw.get("consumer", {}), "consumer"),  # type: ignore[arg-type]
        fetch=_build_section(FetchConfig, raw.get("fetch", {}), "fetch"),  # type: ignore[arg-type]
        publisher=_build_section(PublisherConfig, raw.get("publisher", {}), "publisher"),  # type: ignore[arg-type]
        logging=_build_section(LoggingConfig, raw.get("logging", {}), "logging"),  # type: ignore[arg-type]
    )
