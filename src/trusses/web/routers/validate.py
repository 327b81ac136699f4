"""Configuration validation endpoints."""

from fastapi import APIRouter

from trusses.application.config import ConfigError, load_config_from_dict, validate_config
from trusses.web.schemas.requests import ConfigValidateRequest
from trusses.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a planning configuration without planning the frame.

    Schema errors are reported in ``errors`` rather than as an HTTP error,
    so clients get the same view as ``trusses validate``.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            exit_code=1,
            errors=[
                {"path": d.get("path", ""), "message": d.get("message", "")}
                for d in e.details
            ]
            or [{"path": "", "message": e.message}],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[{"path": e.path, "message": e.message} for e in result.errors],
        warnings=[
            {"path": w.path, "message": w.message, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
