"""
Pydantic configuration for maze generation.

Provides a validated ``MazeConfig`` model plus JSON/YAML file helpers so the
command line and library callers share one set of checks.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from gridmaze.generators.registry import MazeAlgorithm, MazeGenerator
from gridmaze.utils.exceptions import ConfigurationError
from gridmaze.utils.logging import get_logger

logger = get_logger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


class MazeConfig(BaseModel):
    """
    Maze generation configuration with validation.

    Example:
        >>> config = MazeConfig(width=30, height=20, algorithm="hunt", seed=1)
        >>> config.algorithm
        <MazeAlgorithm.HUNT_AND_KILL: 'huntkill'>
    """

    width: int = Field(20, ge=1, description="Number of columns")
    height: int = Field(20, ge=1, description="Number of rows")
    algorithm: MazeAlgorithm = Field(MazeAlgorithm.ALDOUS_BRODER, description="Generation algorithm")
    seed: int | None = Field(None, description="Random seed, None for a fresh one")
    all_linked: bool = Field(False, description="Start from a grid with every adjacent pair linked")
    cell_size: int = Field(10, ge=1, le=200, description="Cell edge length in pixels when rendering")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalise_algorithm(cls, v: Any) -> MazeAlgorithm:
        """Accept algorithm tokens and aliases as well as enum members."""
        return MazeAlgorithm.from_name(v)

    @classmethod
    def from_file(cls, path: str | Path) -> MazeConfig:
        """Load and validate a configuration from a JSON or YAML file."""
        return cls.model_validate(load_config_file(path))

    def to_file(self, path: str | Path) -> Path:
        return save_config_file(self.model_dump(mode="json"), path)

    def create_generator(self) -> MazeGenerator:
        """Build a generator for this configuration."""
        return MazeGenerator(self.width, self.height, self.algorithm, all_linked=self.all_linked)


def load_config_file(path: str | Path) -> dict[str, Any]:
    """
    Load a configuration dictionary from a JSON or YAML file.

    Raises:
        ConfigurationError: If the file is missing or unreadable, has an
            unsupported suffix, or does not hold a mapping
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}",
            generator_name="config",
            suggested_action="Check the path or create the file",
        )

    suffix = path.suffix.lower()
    try:
        with open(path, encoding="utf-8") as f:
            if suffix in JSON_SUFFIXES:
                data = json.load(f)
            elif suffix in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {suffix or '(none)'}",
                    generator_name="config",
                    suggested_action="Use a .json, .yaml or .yml file",
                )
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Could not parse configuration file {path}: {e}",
            generator_name="config",
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Could not read configuration file {path}: {e}",
            generator_name="config",
            suggested_action="Point --config at a readable file",
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping",
            generator_name="config",
            diagnostic_data={"found_type": type(data).__name__},
        )

    logger.debug(f"Loaded configuration from {path}")
    return data


def save_config_file(config: dict[str, Any], path: str | Path) -> Path:
    """Save a configuration dictionary as JSON or YAML, chosen by suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise ConfigurationError(
            f"Unsupported configuration file format: {suffix or '(none)'}",
            generator_name="config",
            suggested_action="Use a .json, .yaml or .yml file",
        )

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        if suffix in JSON_SUFFIXES:
            json.dump(config, f, indent=2, default=str)
        else:
            yaml.safe_dump(config, f, indent=2, default_flow_style=False, sort_keys=False)

    logger.info(f"Configuration saved to {path}")
    return path
