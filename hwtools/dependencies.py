"""Dependency injection container for services."""

import logging
from typing import List, Optional
from pathlib import Path

from hwtools.plugins.registry import ToolRegistry

logger = logging.getLogger(__name__)

# ============================================================================
# Global service instances (singletons exposed via functions for easier testing)
# ============================================================================

_tool_registry_instance = None


def get_tool_registry(plugin_paths: Optional[List[Path]] = None) -> ToolRegistry:
    """Get tool registry (singleton), loading configured plugin directories on first use."""
    global _tool_registry_instance
    if _tool_registry_instance is None:
        from hwtools.constants import PLUGIN_PATHS

        registry = ToolRegistry()
        registry.load_plugins(plugin_paths if plugin_paths is not None else PLUGIN_PATHS)
        _tool_registry_instance = registry
        logger.info(f"Created ToolRegistry instance with {registry.count()} tool(s)")
    return _tool_registry_instance


def reset_services():
    """Reset all service instances (only for testing)."""
    global _tool_registry_instance

    _tool_registry_instance = None
    logger.info("Reset all service instances")
