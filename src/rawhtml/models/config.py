"""Pydantic configuration models for rawhtml."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from ..errors import ConfigError


class FragmentConfig(BaseModel):
    """Configuration for the fragment-parsing service."""

    parser_features: Literal["html.parser", "lxml", "html5lib"] = Field(
        "html.parser",
        description="BeautifulSoup tree builder used to parse HTML fragments",
    )
    raw_html_attribute: str = Field(
        "data-raw-html",
        min_length=1,
        description="Attribute stamped on every element of a delegated fragment",
    )

    model_config = {"extra": "forbid"}


class ListConfig(BaseModel):
    """Configuration for list handling inside table cells."""

    task_attribute: str = Field("data-task", min_length=1, description="Marker for task list items")
    task_checked_attribute: str = Field(
        "data-task-checked",
        min_length=1,
        description="Marker for checked task list items",
    )

    model_config = {"extra": "forbid"}


class SanitizerConfig(BaseModel):
    """Configuration for URL attribute sanitization."""

    blocked_schemes: list[str] = Field(
        default_factory=lambda: ["javascript", "vbscript", "livescript", "x"],
        description="URL schemes that cause href/src values to be dropped",
    )

    model_config = {"extra": "forbid"}


class ConverterConfig(BaseModel):
    """
    Root configuration for the HTML conversion pass.

    Example:
        config = ConverterConfig(fragment=FragmentConfig(parser_features="lxml"))

    YAML format:
        fragment:
          parser_features: html.parser
        lists:
          task_attribute: data-task
        log_level: DEBUG
    """

    fragment: FragmentConfig = Field(default_factory=FragmentConfig)
    lists: ListConfig = Field(default_factory=ListConfig)
    sanitizer: SanitizerConfig = Field(default_factory=SanitizerConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        yaml = _import_yaml()

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConverterConfig":
        """Load config from YAML string."""
        yaml = _import_yaml()

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "ConverterConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())


def _import_yaml():
    try:
        import yaml
    except ImportError as err:
        raise ConfigError("PyYAML is required for YAML configuration files") from err
    return yaml
