"""Exceptions and structured error codes.

Every exception raised by ogkit derives from :class:`OpenGraphError` and
carries a catalogue ``code`` so callers (and the CLI) can look up a
human-readable resolution with :func:`format_error`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorCategory(StrEnum):
    """Error category classification."""

    FETCH = "FETCH"
    PARSE = "PARSE"
    PUBLISH = "PUBLISH"
    CONFIG = "CONFIG"


@dataclass(frozen=True)
class OgError:
    """Structured error with code, message, and resolution."""

    code: str
    category: ErrorCategory
    message: str
    resolution: str

    def to_dict(self) -> dict[str, object]:
        return {
            "error": {
                "code": self.code,
                "category": self.category.value,
                "message": self.message,
                "resolution": self.resolution,
            },
        }

    def format(self) -> str:
        return f"Error [{self.code}]: {self.message}\nResolution: {self.resolution}"


# ── Pre-defined error catalog ─────────────────────────────────────

ERRORS: dict[str, OgError] = {
    "E001": OgError(
        code="OG_E001",
        category=ErrorCategory.FETCH,
        message="Failed to fetch the document",
        resolution=(
            "Check the URL is reachable over http(s) and returns a 2xx response"
        ),
    ),
    "E002": OgError(
        code="OG_E002",
        category=ErrorCategory.PARSE,
        message="Unexpected Open Graph value",
        resolution=(
            "Fix the page markup (sub-properties must follow their primary "
            "property) or disable strict mode"
        ),
    ),
    "E003": OgError(
        code="OG_E003",
        category=ErrorCategory.PUBLISH,
        message="Value cannot be rendered as a meta tag",
        resolution=(
            "Assign str, bool, int, float or datetime values to Open Graph fields"
        ),
    ),
    "E004": OgError(
        code="OG_E004",
        category=ErrorCategory.CONFIG,
        message="Invalid configuration value",
        resolution=(
            "Check config.toml for valid values. Run 'ogkit config show' to review."
        ),
    ),
}


def get_error(code: str) -> OgError | None:
    """Look up an error by short code (e.g. 'E001')."""
    return ERRORS.get(code)


def format_error(code: str) -> str:
    """Format an error message by code."""
    err = ERRORS.get(code)
    if err is None:
        return f"Unknown error: {code}"
    return err.format()


# ── Exceptions ────────────────────────────────────────────────────


class OpenGraphError(Exception):
    """Base class for all ogkit errors."""

    code: str = ""


class FetchError(OpenGraphError):
    """Raised when the HTTP collaborator cannot deliver a document."""

    code = "E001"

    def __init__(self, url: str, reason: str, *, status: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"{url}: {reason}")


class UnexpectedValueException(OpenGraphError):
    """Raised in strict mode for orphaned or uncoercible properties.

    ``array_field`` names the array the property belongs to, or is
    ``None`` when a scalar value failed to coerce.
    """

    code = "E002"

    def __init__(
        self,
        property_name: str,
        value: str,
        reason: str,
        *,
        array_field: str | None = None,
    ) -> None:
        self.property_name = property_name
        self.value = value
        self.reason = reason
        self.array_field = array_field
        where = f" (array '{array_field}')" if array_field else ""
        super().__init__(f"{property_name}{where}: {reason}")


ParseAnomaly = UnexpectedValueException


class UnsupportedValueException(OpenGraphError):
    """Raised when the publisher meets a value it cannot render."""

    code = "E003"

    def __init__(self, property_name: str, value: object) -> None:
        self.property_name = property_name
        self.value = value
        super().__init__(
            f"{property_name}: unsupported value of type {type(value).__name__}"
        )


class ConfigError(OpenGraphError):
    """Raised when a configuration file cannot be read."""

    code = "E004"
