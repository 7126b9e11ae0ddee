"""Import configuration and project-level defaults."""

from typing import TypeAlias
import logging
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

ConfigDict: TypeAlias = dict[str, str | bool | list[str]]

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent
OUTPUT_FORMATS = ("text", "csv", "json")


@dataclass(frozen=True)
class CsvConfig:
    delimiter: str = ","
    has_header: bool = False
    encodings: tuple[str, ...] = ("utf-8", "latin-1", "cp1252")
    strip_whitespace: bool = True


@dataclass(frozen=True)
class RenderConfig:
    indent: str = "\t"


@dataclass(frozen=True)
class ImportConfig:
    csv: CsvConfig = field(default_factory=CsvConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    output_format: str = "text"


def get_env_config(root: Path = PROJECT_ROOT) -> ConfigDict:
    """Read the ``[tool.hierarchy]`` table from pyproject.toml."""
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return {}
    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("hierarchy", {})


def get_yaml_config(root: Path = PROJECT_ROOT) -> ConfigDict:
    config_path = root / "hierarchy.yaml"
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def apply_overrides(config: ImportConfig, overrides: ConfigDict) -> ImportConfig:
    """Return a copy of *config* with flat ``overrides`` applied."""
    csv_config, render_config = config.csv, config.render
    output_format = config.output_format

    for key, value in overrides.items():
        match key:
            case "delimiter":
                csv_config = replace(csv_config, delimiter=str(value))
            case "has_header":
                csv_config = replace(csv_config, has_header=bool(value))
            case "encodings":
                csv_config = replace(csv_config, encodings=tuple(value))
            case "strip_whitespace":
                csv_config = replace(csv_config, strip_whitespace=bool(value))
            case "indent":
                render_config = replace(render_config, indent=str(value))
            case "output_format" if value in OUTPUT_FORMATS:
                output_format = value
            case "output_format":
                raise ValueError(f"Unsupported output format: {value}")
            case other:
                raise ValueError(f"Unknown config key: {other}")

    return ImportConfig(csv=csv_config, render=render_config, output_format=output_format)


def load_import_config(
    overrides: ConfigDict | None = None,
    root: Path | None = None,
) -> ImportConfig:
    """Defaults, then pyproject.toml, then hierarchy.yaml, then *overrides*."""
    root = root or PROJECT_ROOT
    config = ImportConfig()
    for source in (get_env_config(root), get_yaml_config(root), overrides or {}):
        config = apply_overrides(config, source)
    logger.debug("Loaded import config: %s", config)
    return config
