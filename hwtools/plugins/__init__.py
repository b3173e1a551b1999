"""Hardware tool plugin system.

Imports are lazy so that lightweight consumers (e.g. the CLI validating a single
manifest) do not pull in every submodule.
"""

__all__ = [
    "ToolManifest",
    "ToolMeta",
    "ExecConfig",
    "TransportConfig",
    "TransportKind",
    "ParameterDef",
    "ParamType",
    "load_manifest",
    "load_manifest_file",
    "project_schema",
    "function_definition",
    "normalize_arguments",
    "ToolRegistry",
    "ToolInstance",
    "ToolError",
    "ManifestError",
    "ManifestParseError",
    "ManifestValidationError",
    "ArgumentError",
]

_MANIFEST_NAMES = (
    "ToolManifest",
    "ToolMeta",
    "ExecConfig",
    "TransportConfig",
    "TransportKind",
    "ParameterDef",
    "ParamType",
)
_ERROR_NAMES = (
    "ToolError",
    "ManifestError",
    "ManifestParseError",
    "ManifestValidationError",
    "ArgumentError",
)


def __getattr__(name):
    if name in _MANIFEST_NAMES:
        from hwtools.plugins import manifest
        return getattr(manifest, name)
    if name in _ERROR_NAMES:
        from hwtools.plugins import errors
        return getattr(errors, name)
    if name in ("load_manifest", "load_manifest_file"):
        from hwtools.plugins import loader
        return getattr(loader, name)
    if name in ("project_schema", "function_definition"):
        from hwtools.plugins import schema
        return getattr(schema, name)
    if name == "normalize_arguments":
        from hwtools.plugins.arguments import normalize_arguments
        return normalize_arguments
    if name in ("ToolRegistry", "ToolInstance"):
        from hwtools.plugins import registry
        return getattr(registry, name)
    raise AttributeError(f"module 'hwtools.plugins' has no attribute {name!r}")
