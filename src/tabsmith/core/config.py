"""Configuration model used by the table converter.

ConverterConfig

`parser` (`str`)
: BeautifulSoup backend used to read the HTML input. The default `lxml`
  closes omitted `</td>` and `</tr>` tags the way browsers do; `html5lib` is
  accepted when installed. A backend that is not installed falls back to
  Python's `html.parser`.

`indent` (`str`)
: Prefix written before every row line of the emitted table.

`span_policy` (`"literal" | "strict"`)
: How `rowspan`/`colspan` values reach the output. `literal` copies the
  attribute text verbatim (so `colspan="abc"` is emitted as `colspan: abc`),
  `strict` rejects anything that is not a positive integer.

`clipboard_timeout` (`float`)
: Seconds to wait for the platform clipboard command before giving up.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import yaml


SpanPolicy = Literal["literal", "strict"]


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded."""


class ConverterConfig(BaseModel):
    """Options controlling parsing, emission, and clipboard access."""

    model_config = ConfigDict(extra="forbid")

    parser: str = Field(default="lxml", min_length=1)
    indent: str = "  "
    span_policy: SpanPolicy = "literal"
    clipboard_timeout: float = Field(default=10.0, gt=0)

    def merged(self, **overrides: Any) -> ConverterConfig:
        """Return a copy with the non-``None`` overrides applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        try:
            return ConverterConfig.model_validate({**self.model_dump(), **updates})
        except ValidationError as exc:
            raise ConfigError(f"Invalid converter settings: {exc}") from exc


def load_config(path: Path | str) -> ConverterConfig:
    """Load a :class:`ConverterConfig` from a YAML file."""
    source = Path(path)
    try:
        payload = yaml.safe_load(source.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration '{source}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in configuration '{source}': {exc}") from exc

    if payload is None:
        return ConverterConfig()
    if not isinstance(payload, dict):
        raise ConfigError(f"Configuration '{source}' must contain a mapping.")

    try:
        return ConverterConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration '{source}': {exc}") from exc


__all__ = ["ConfigError", "ConverterConfig", "SpanPolicy", "load_config"]
