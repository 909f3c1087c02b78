"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from services.config_manager import ConfigManager

router = APIRouter()


class CompareConfig(BaseModel):
    """Persisted comparison defaults"""

    ignoreWhitespace: bool = False
    ignoreCase: bool = False
    maxLines: int = 50000


class CompareConfigUpdate(BaseModel):
    """Partial update of comparison defaults"""

    ignoreWhitespace: bool | None = None
    ignoreCase: bool | None = None
    maxLines: int | None = Field(default=None, gt=0)


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    compare: CompareConfigUpdate | None = None
    server: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    compare: CompareConfig
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config_manager = ConfigManager.get_instance()
    options = config_manager.compare_options()

    return ConfigResponse(
        compare=CompareConfig(
            ignoreWhitespace=options.ignore_whitespace,
            ignoreCase=options.ignore_case,
            maxLines=config_manager.max_lines(),
        ),
        server=config_manager.get_config().get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()

    # Update only provided fields
    try:
        if request.compare:
            config_manager.update_section("compare", request.compare.model_dump(exclude_none=True))
        if request.server:
            config_manager.update_section("server", request.server)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}
