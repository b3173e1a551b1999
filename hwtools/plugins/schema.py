"""Schema projection - builds the model-facing JSON Schema for a tool."""

from typing import Any, Dict

from hwtools.plugins.manifest import ToolManifest


def project_schema(manifest: ToolManifest) -> Dict[str, Any]:
    """Build the JSON Schema object describing a tool's parameters.

    Properties and the required list both follow declaration order.
    """
    properties: Dict[str, Any] = {}
    for param in manifest.parameters:
        prop: Dict[str, Any] = {
            "type": param.type.json_type,
            "description": param.description,
        }
        if param.has_default:
            prop["default"] = param.default
        properties[param.name] = prop

    return {
        "type": "object",
        "properties": properties,
        "required": [p.name for p in manifest.parameters if p.required],
    }


def function_definition(manifest: ToolManifest) -> Dict[str, Any]:
    """Build the function-calling definition registered with the model."""
    return {
        "name": manifest.name,
        "description": manifest.description,
        "parameters": project_schema(manifest),
    }
