"""Configuration schema and loading for frame planning files.

Public API:
    - PlannerConfiguration: Root configuration model
    - FrameConfig, AutoFitConfig, OutputConfig: Section models
    - load_config / load_config_from_dict: Load and validate configuration
    - ConfigError: Exception for configuration errors
    - validate_config: Advisory checks on a loaded configuration
    - config_to_*: Conversion to DTOs and domain objects

Example:
    >>> from pathlib import Path
    >>> from trusses.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("stage.json"))
    ...     print(f"Frame: {config.frame.width}x{config.frame.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from trusses.application.config.adapter import (
    config_to_fit_input,
    config_to_frame_input,
    config_to_inventory,
    config_to_search_bounds,
)
from trusses.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from trusses.application.config.schema import (
    SUPPORTED_VERSIONS,
    AutoFitConfig,
    FrameConfig,
    OutputConfig,
    PlannerConfiguration,
)
from trusses.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_frame_advisories,
    check_inventory,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "AutoFitConfig",
    "ConfigError",
    "FrameConfig",
    "OutputConfig",
    "PlannerConfiguration",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_frame_advisories",
    "check_inventory",
    "config_to_fit_input",
    "config_to_frame_input",
    "config_to_inventory",
    "config_to_search_bounds",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
