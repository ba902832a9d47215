"""
Runtime settings for consignment validation.

Settings cover logging, output formatting and metrics only. Validation rules
and their bounds are fixed in code and cannot be configured.

Expected YAML format:
```yaml
log_level: DEBUG
log_format: text
output_indent: 4
metrics_enabled: false
```
"""

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Environment variable -> settings field
ENV_VARS = {
    "LOG_LEVEL": "log_level",
    "LOG_FORMAT": "log_format",
    "CONSIGNMENT_OUTPUT_INDENT": "output_indent",
    "CONSIGNMENT_METRICS_ENABLED": "metrics_enabled",
}


class Settings(BaseModel):
    """
    Settings for logging, CLI output and metrics.

    Attributes:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_format: "json" (structured) or "text" (local development)
        output_indent: JSON indent for CLI output (0 = compact)
        metrics_enabled: Whether the rule engine records Prometheus metrics
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    output_indent: int = Field(2, ge=0, le=8)
    metrics_enabled: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        return v.lower() if isinstance(v, str) else v

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """
        Build settings from environment variables (see ENV_VARS).

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        values = {field: environ[var] for var, field in ENV_VARS.items() if var in environ}
        return cls.model_validate(values)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "Settings":
        """
        Load settings from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid YAML or does not hold a mapping
            pydantic.ValidationError: If a setting is invalid
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Settings file not found: {config_path}")

        try:
            with open(config_path) as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Settings file is not valid YAML: {config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(f"Settings file must contain a mapping: {config_path}")

        return cls.model_validate(config)
