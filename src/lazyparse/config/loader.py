"""YAML configuration loading and validation."""

import yaml
from pathlib import Path
from typing import Union
from .schema import PipelineConfig

class ConfigLoadError(Exception):
    """Exception raised when config loading or validation fails."""
    pass

def load_config(path: Union[str, Path]) -> PipelineConfig:
    """
    Load and validate a pipeline config from YAML file.

    Args:
        path: Path to YAML config file

    Returns:
        PipelineConfig: Validated config object

    Raises:
        ConfigLoadError: If file cannot be read or config is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}")

    return _validate(data, str(path))

def load_config_from_string(yaml_content: str) -> PipelineConfig:
    """
    Load and validate a pipeline config from YAML string.

    Args:
        yaml_content: YAML content as string

    Returns:
        PipelineConfig: Validated config object

    Raises:
        ConfigLoadError: If YAML is invalid or config validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}")

    return _validate(data, "config content")

def _validate(data, origin: str) -> PipelineConfig:
    # An empty document means all defaults
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"{origin} must contain a YAML mapping, got {type(data).__name__}")

    try:
        config = PipelineConfig.model_validate(data)
    except Exception as e:
        raise ConfigLoadError(f"Config validation failed: {e}")

    issues = config.validate_tables()
    if issues:
        raise ConfigLoadError(f"Config validation issues: {'; '.join(issues)}")

    return config
