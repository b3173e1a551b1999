"""Manifest loader - turns tool.toml text into a validated ToolManifest."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from hwtools.constants import MANIFEST_FILE
from hwtools.plugins.errors import (
    ManifestIssue,
    ManifestParseError,
    ManifestValidationError,
)
from hwtools.plugins.manifest import ToolManifest

logger = logging.getLogger(__name__)

# pydantic error types that mean "structurally valid, semantically wrong"
SEMANTIC_ERROR_TYPES = frozenset(
    {
        "enum",
        "string_too_short",
        "required_with_default",
        "default_type_mismatch",
        "duplicate_parameter",
    }
)


def load_manifest(text: str, source: Optional[str] = None) -> ToolManifest:
    """Parse and validate manifest text.

    Args:
        text: Raw tool.toml contents
        source: Where the text came from, used to prefix error messages

    Returns:
        The validated, immutable ToolManifest

    Raises:
        ManifestParseError: Invalid TOML, missing required field or wrong value shape
        ManifestValidationError: Unknown type tag, bad default, duplicate parameter name
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ManifestParseError(source, [ManifestIssue("", f"invalid TOML: {e}")]) from e

    manifest = validate_manifest(data, source)
    logger.debug(f"Loaded manifest '{manifest.name}' from {source or '<string>'}")
    return manifest


def validate_manifest(data: Mapping[str, Any], source: Optional[str] = None) -> ToolManifest:
    """Validate already-decoded manifest data (e.g. a TOML table)."""
    try:
        return ToolManifest.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        issues = [_to_issue(error, data) for error in errors]
        if all(_is_semantic(error) for error in errors):
            raise ManifestValidationError(source, issues) from e
        raise ManifestParseError(source, issues) from e


def load_manifest_file(path: Union[str, Path]) -> ToolManifest:
    """Load a manifest from a tool.toml file or from a plugin directory containing one."""
    manifest_file = Path(path)
    if manifest_file.is_dir():
        manifest_file = manifest_file / MANIFEST_FILE

    try:
        text = manifest_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(
            str(manifest_file), [ManifestIssue("", f"cannot read manifest: {e}")]
        ) from e

    return load_manifest(text, source=str(manifest_file))


def _is_semantic(error: Dict[str, Any]) -> bool:
    # A non-string tag (e.g. type = 5) is a malformed value, not an unknown tag
    if error["type"] == "enum":
        return isinstance(error.get("input"), str)
    return error["type"] in SEMANTIC_ERROR_TYPES


def _to_issue(error: Dict[str, Any], data: Mapping[str, Any]) -> ManifestIssue:
    ctx = error.get("ctx") or {}
    loc = list(error["loc"])

    # Whole-manifest validators report an empty loc; point at the parameter instead
    if error["type"] == "duplicate_parameter":
        loc = ["parameters", ctx["index"]]
    if "field" in ctx:
        loc.append(ctx["field"])

    value = ctx["value"] if "value" in ctx else error.get("input")
    if error["type"] == "missing" or isinstance(value, (dict, list)):
        value = None

    return ManifestIssue(_format_path(loc, data), error["msg"], value)


def _format_path(loc: List[Any], data: Mapping[str, Any]) -> str:
    """Render a pydantic loc as e.g. ``parameters[1](bus).type``."""
    parts: List[str] = []
    for i, key in enumerate(loc):
        if isinstance(key, int):
            label = f"[{key}]"
            if i > 0 and loc[i - 1] == "parameters":
                name = _raw_parameter_name(data, key)
                if name:
                    label += f"({name})"
            if parts:
                parts[-1] += label
            else:
                parts.append(label)
        else:
            parts.append(str(key))
    return ".".join(parts)


def _raw_parameter_name(data: Mapping[str, Any], index: int) -> Optional[str]:
    params = data.get("parameters") if isinstance(data, Mapping) else None
    if not isinstance(params, list) or index >= len(params):
        return None
    entry = params[index]
    if isinstance(entry, Mapping) and isinstance(entry.get("name"), str):
        return entry["name"]
    return None
