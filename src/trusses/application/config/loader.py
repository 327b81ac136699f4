"""Loading of frame planning configuration files.

JSON files are read, parsed and validated against PlannerConfiguration.
Every failure is reported as a ConfigError whose ``error_type`` tells the
caller which stage failed.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from trusses.application.config.schema import PlannerConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: Path to the configuration file (if applicable)
        details: Line/column for JSON errors, one dict per field for
            validation errors
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a Pydantic error location as a dotted path.

    Examples:
        >>> _format_json_path(("frame", "width"))
        'frame.width'
        >>> _format_json_path(("auto_fit", "step"))
        'auto_fit.step'
        >>> _format_json_path(("inventory", 0))
        'inventory[0]'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        if detail.get("value") is not None:
            line += f" (got: {detail['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )
    except UnicodeDecodeError as e:
        raise ConfigError(
            message=f"Config file is not UTF-8 text: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def _validate(data: Any, path: Path | None = None) -> PlannerConfiguration:
    try:
        return PlannerConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> PlannerConfiguration:
    """Load and validate a frame planning configuration from a JSON file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid
            JSON, or does not match the schema.

    Example:
        >>> try:
        ...     config = load_config(Path("my-frame.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    return _validate(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> PlannerConfiguration:
    """Validate a configuration supplied as a dictionary (e.g. an API body).

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
