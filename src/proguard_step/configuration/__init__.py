"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, load_skip_flag
from .runtime_settings import (
    BuildProject,
    Configuration,
    PluginArtifact,
    ShrinkSettings,
    ToolSettings,
)

__all__ = [
    "BuildProject",
    "Configuration",
    "PluginArtifact",
    "ShrinkSettings",
    "ToolSettings",
    "ConfigurationError",
    "load_configuration",
    "load_skip_flag",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
