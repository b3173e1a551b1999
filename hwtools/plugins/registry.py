"""Tool registry - tracks every loaded hardware tool plugin by name."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from hwtools.plugins.arguments import RawArguments, normalize_arguments
from hwtools.plugins.errors import ManifestError, ToolError
from hwtools.plugins.loader import load_manifest_file
from hwtools.plugins.manifest import ToolManifest
from hwtools.plugins.schema import function_definition, project_schema

logger = logging.getLogger(__name__)


class DuplicateToolError(ToolError):
    """Raised when a second plugin claims an already registered tool name."""


class UnknownToolError(ToolError, LookupError):
    """Raised when a tool name is not in the registry."""


@dataclass(frozen=True)
class ToolInstance:
    """A loaded plugin: its manifest plus where it lives."""

    manifest: ToolManifest
    path: Path
    source: str = "configured"  # "configured" | "external"

    @property
    def name(self) -> str:
        return self.manifest.name

    @property
    def binary_path(self) -> Path:
        return self.manifest.binary_path(self.path)

    def to_dict(self) -> dict:
        """Serialize tool instance to dict for API responses."""
        transport = self.manifest.transport
        return {
            "name": self.manifest.tool.name,
            "version": self.manifest.tool.version,
            "description": self.manifest.tool.description,
            "binary": str(self.binary_path),
            "source": self.source,
            "transport": transport.model_dump(mode="json") if transport else None,
            "parameters": project_schema(self.manifest),
        }


class ToolRegistry:
    """Central registry for all loaded tools, keyed by tool name."""

    def __init__(self):
        self._tools: Dict[str, ToolInstance] = {}

    def register(self, instance: ToolInstance) -> None:
        """Register a tool instance. Tool names must be unique."""
        existing = self._tools.get(instance.name)
        if existing is not None:
            raise DuplicateToolError(
                f"Tool '{instance.name}' from {instance.path} already registered from {existing.path}"
            )
        self._tools[instance.name] = instance
        logger.info(f"Registered tool: {instance.name} ({instance.source})")

    def load_plugin(self, plugin_dir: Path, source: str = "configured") -> ToolInstance:
        """Load one plugin directory's manifest and register it.

        Raises:
            ManifestError: The manifest failed to parse or validate
            DuplicateToolError: Another plugin already uses the tool name
        """
        plugin_dir = Path(plugin_dir)
        manifest = load_manifest_file(plugin_dir)
        instance = ToolInstance(manifest=manifest, path=plugin_dir, source=source)
        self.register(instance)
        return instance

    def load_plugins(self, plugin_dirs: Iterable[Path], source: str = "configured") -> List[ToolInstance]:
        """Load an explicit list of plugin directories.

        A plugin whose manifest is invalid or whose name is taken is logged and
        left out; the remaining plugins still load.
        """
        loaded = []
        for plugin_dir in plugin_dirs:
            try:
                loaded.append(self.load_plugin(plugin_dir, source))
            except ManifestError as e:
                logger.error(f"Invalid manifest in {plugin_dir}, skipping: {e}")
            except DuplicateToolError as e:
                logger.error(f"{e}, skipping")

        logger.info(f"Loaded {len(loaded)} tool(s)")
        return loaded

    def get(self, name: str) -> Optional[ToolInstance]:
        """Get a tool by name."""
        return self._tools.get(name)

    def require(self, name: str) -> ToolInstance:
        """Get a tool by name, raising UnknownToolError if absent."""
        instance = self._tools.get(name)
        if instance is None:
            raise UnknownToolError(f"Tool '{name}' not found")
        return instance

    def get_all(self) -> list[ToolInstance]:
        """Get all registered tools in registration order."""
        return list(self._tools.values())

    def function_definitions(self) -> list[Dict[str, Any]]:
        """Function-calling definitions for every registered tool."""
        return [function_definition(t.manifest) for t in self._tools.values()]

    def normalize(self, name: str, arguments: RawArguments) -> Dict[str, Any]:
        """Normalize a tool call's arguments against that tool's manifest."""
        return normalize_arguments(self.require(name).manifest, arguments)

    def remove(self, name: str) -> Optional[ToolInstance]:
        """Remove a tool from the registry."""
        return self._tools.pop(name, None)

    def has(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._tools

    def count(self) -> int:
        """Get total number of registered tools."""
        return len(self._tools)
