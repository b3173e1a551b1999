"""Global constants for the hardware tool host."""

import os
from pathlib import Path

# Manifest file expected inside every plugin directory
MANIFEST_FILE = "tool.toml"

# Home for user plugins (supports HWTOOLS_HOME env var)
_tools_home_env = os.getenv("HWTOOLS_HOME", "")
TOOLS_HOME = Path(_tools_home_env).expanduser() if _tools_home_env else Path.home() / ".hwtools" / "tools"


def parse_plugin_paths(value: str, base: Path = TOOLS_HOME) -> list[Path]:
    """Split a colon-separated list of plugin directories.

    Relative entries are resolved against ``base``; blank entries are ignored.
    """
    paths = []
    for entry in value.split(":"):
        entry = entry.strip()
        if not entry:
            continue
        path = Path(entry).expanduser()
        paths.append(path if path.is_absolute() else base / path)
    return paths


# Explicit plugin directories to register at startup
PLUGIN_PATHS = parse_plugin_paths(os.getenv("HWTOOLS_PLUGIN_PATHS", ""))
