"""Configuration for null-safe text operations.

The sequence functions are configuration-free; ``TextConfig`` captures the
choices a caller would otherwise pass on every call (null ordering, case
handling, strip characters) along with presentation settings for the
command line.
"""

import json
from dataclasses import asdict, dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class OutputFormat(Enum):
    """Output format options for rendered results."""

    TEXT = "text"
    JSON = "json"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class TextConfig:
    """Immutable settings shared by comparisons, stripping and output.

    Attributes:
        null_is_less: Whether None sorts before any text
        ignore_case: Whether matching and comparison ignore case
        strip_chars: Characters removed by strip operations, None for whitespace
        null_token: Command-line spelling of None
        output_format: Rendering of operation results
        correlation_id: Correlation ID attached to log records
    """

    null_is_less: bool = True
    ignore_case: bool = False
    strip_chars: Optional[str] = None
    null_token: str = "<null>"
    output_format: OutputFormat = OutputFormat.TEXT
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate text configuration."""
        if not isinstance(self.null_token, str) or not self.null_token:
            raise ConfigValidationError(
                "null_token must be a non-empty string",
                field_name="null_token",
                suggestions=["Use a spelling that cannot occur in real input, e.g. '<null>'"],
            )
        if self.strip_chars is not None and not isinstance(self.strip_chars, str):
            raise ConfigValidationError(
                "strip_chars must be a string or None", field_name="strip_chars"
            )
        if not isinstance(self.output_format, OutputFormat):
            raise ConfigValidationError(
                f"output_format must be an OutputFormat, got {self.output_format!r}",
                field_name="output_format",
                suggestions=[fmt.name for fmt in OutputFormat],
            )

    # Preset factory methods
    @classmethod
    def default(cls) -> "TextConfig":
        """Case-sensitive configuration with None sorting first."""
        return cls()

    @classmethod
    def case_insensitive(cls) -> "TextConfig":
        """Configuration that ignores case when matching and comparing."""
        return cls(ignore_case=True)

    @classmethod
    def nulls_last(cls) -> "TextConfig":
        """Configuration sorting None after any text."""
        return cls(null_is_less=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result = asdict(self)
        result["output_format"] = self.output_format.name
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextConfig":
        """Create configuration from dictionary.

        Args:
            data: Field values; ``output_format`` may be an enum name or value

        Returns:
            TextConfig instance

        Raises:
            ConfigValidationError: On unknown fields or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )

        values = dict(data)
        if "output_format" in values:
            values["output_format"] = _parse_output_format(values["output_format"])
        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "TextConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError("Configuration JSON must be an object")
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "TextConfig":
        """Load configuration from a JSON file; a missing file yields defaults."""
        path = Path(config_path)
        if not path.exists():
            return cls()
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read config file {path}: {e}") from e
        return cls.from_json(content)


def _parse_output_format(value: Any) -> OutputFormat:
    if isinstance(value, OutputFormat):
        return value
    if isinstance(value, str):
        for fmt in OutputFormat:
            if value.upper() == fmt.name or value.lower() == fmt.value:
                return fmt
    raise ConfigValidationError(
        f"Unknown output format: {value!r}",
        field_name="output_format",
        suggestions=[fmt.value for fmt in OutputFormat],
    )
