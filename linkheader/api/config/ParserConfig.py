"""Link header parser configuration."""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..types.ResolvedUrl import ResolvedUrl


class ParserConfig(BaseModel):
    """Configuration for parsing Link headers."""

    model_config = ConfigDict(extra="forbid")

    base_url: str | None = Field(None, description="Absolute URL anchors resolve against")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("WARNING", description="Logging level")
    log_file: str | None = Field(None, description="Rotating log file path; silent when unset")

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, v: str | None) -> str | None:
        if v is None:
            return None
        resolved = ResolvedUrl.parse(v)
        if resolved is None:
            raise ValueError(f"base_url must be an absolute URL: {v}")
        return str(resolved)

    @classmethod
    def load(cls, path: str | Path) -> "ParserConfig":
        """Load and validate config from a JSON file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = Path(path).expanduser()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            first = e.errors()[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc)
            error_msg = first.get("msg", str(e))
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
