"""Tool REST API endpoints - schemas for the model and argument checks for tool calls."""

import logging
from typing import Any, Dict, Union

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from hwtools.dependencies import get_tool_registry
from hwtools.plugins.errors import ArgumentError
from hwtools.plugins.registry import ToolInstance

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tools", tags=["tools"])


class ToolCallArguments(BaseModel):
    """Request body carrying a model's tool-call arguments."""

    arguments: Union[Dict[str, Any], str, None] = None


def _get_tool(name: str) -> ToolInstance:
    instance = get_tool_registry().get(name)
    if not instance:
        raise HTTPException(status_code=404, detail=f"Tool '{name}' not found")
    return instance


@router.get("/")
async def list_tools():
    """List function-calling definitions for every loaded tool."""
    registry = get_tool_registry()
    return {"tools": registry.function_definitions()}


@router.get("/{name}")
async def get_tool(name: str):
    """Get detailed information about a specific tool."""
    return _get_tool(name).to_dict()


@router.post("/{name}/arguments")
async def normalize_tool_arguments(name: str, body: ToolCallArguments):
    """Validate a tool call's arguments and return them with defaults applied."""
    instance = _get_tool(name)
    try:
        arguments = get_tool_registry().normalize(instance.name, body.arguments)
    except ArgumentError as e:
        logger.info(f"Rejected arguments for tool '{name}': {e}")
        return JSONResponse(status_code=422, content=e.to_dict())
    return {"tool": instance.name, "arguments": arguments}
