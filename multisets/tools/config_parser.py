from typing import Any

import yaml
from dacite import from_dict
from dacite.config import Config as DaciteConfig

from multisets.tools.configs import ToolConfig


def validate_config(config: ToolConfig) -> None:
    """
    Check the values dacite cannot check from the types alone.

    Raises:
        ValueError: If min_count or limit is negative.
    """
    if config.count.min_count < 0:
        raise ValueError(f"min_count must be non-negative, got {config.count.min_count}")
    if config.output.limit is not None and config.output.limit < 0:
        raise ValueError(f"limit must be non-negative, got {config.output.limit}")


def parse_config(config: Any) -> ToolConfig:
    tool_config = from_dict(ToolConfig, config or {}, DaciteConfig(strict=True))
    validate_config(tool_config)
    return tool_config


def load_config(path: str) -> ToolConfig:
    """
    Read a ToolConfig from a yaml file. An empty file gives the default config.
    """
    with open(path) as f:
        return parse_config(yaml.safe_load(f))
