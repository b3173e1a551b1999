"""Argument normalization - validates model-supplied arguments before a tool is spawned."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Union

from hwtools.plugins.errors import (
    INVALID_PAYLOAD,
    MISSING_REQUIRED,
    TYPE_MISMATCH,
    UNKNOWN_PARAMETER,
    ArgumentError,
    ArgumentIssue,
)
from hwtools.plugins.manifest import ToolManifest

RawArguments = Union[Mapping[str, Any], str, bytes, None]


def parse_arguments(manifest: ToolManifest, raw: RawArguments) -> Mapping[str, Any]:
    """Accept arguments as a mapping, None, or a JSON object string.

    Function-calling APIs usually deliver arguments as a JSON string.
    """
    if raw is None:
        return {}
    if isinstance(raw, (str, bytes)):
        if not raw.strip():
            return {}
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ArgumentError(
                manifest.name,
                [ArgumentIssue(INVALID_PAYLOAD, None, f"arguments are not valid JSON: {e.msg}")],
            ) from e
        except UnicodeDecodeError as e:
            raise ArgumentError(
                manifest.name,
                [ArgumentIssue(INVALID_PAYLOAD, None, f"arguments are not valid UTF-8: {e.reason}")],
            ) from e
    if not isinstance(raw, Mapping):
        raise ArgumentError(
            manifest.name,
            [
                ArgumentIssue(
                    INVALID_PAYLOAD,
                    None,
                    f"arguments must be an object, got {type(raw).__name__}",
                    expected="object",
                )
            ],
        )
    return raw


def normalize_arguments(manifest: ToolManifest, arguments: RawArguments) -> Dict[str, Any]:
    """Validate arguments against a manifest and apply declared defaults.

    Args:
        manifest: The tool's validated manifest
        arguments: Caller-supplied arguments (mapping, JSON string or None)

    Returns:
        A new dict holding every supplied argument plus defaults for omitted
        optional parameters. Optional parameters without a default are left out.

    Raises:
        ArgumentError: Missing required parameters, type mismatches or unknown
            keys. All issues found are reported together.
    """
    supplied = parse_arguments(manifest, arguments)
    issues: List[ArgumentIssue] = []
    result: Dict[str, Any] = {}

    for param in manifest.parameters:
        if param.name not in supplied:
            if param.required:
                issues.append(
                    ArgumentIssue(
                        MISSING_REQUIRED,
                        param.name,
                        f"missing required parameter: {param.name}",
                        expected=param.type.value,
                    )
                )
            elif param.has_default:
                result[param.name] = param.default
            continue

        value = supplied[param.name]
        try:
            result[param.name] = param.type.coerce(value)
        except TypeError:
            issues.append(
                ArgumentIssue(
                    TYPE_MISMATCH,
                    param.name,
                    f"type mismatch for parameter '{param.name}': "
                    f"expected {param.type.value}, got {value!r}",
                    expected=param.type.value,
                    actual=value,
                )
            )

    declared = set(manifest.parameter_names)
    for key in supplied:
        if key not in declared:
            issues.append(
                ArgumentIssue(UNKNOWN_PARAMETER, str(key), f"unknown parameter: {key}", actual=supplied[key])
            )

    if issues:
        raise ArgumentError(manifest.name, issues)
    return result

