#!/usr/bin/env python3
"""Hardware tool management CLI."""

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from hwtools.constants import MANIFEST_FILE, PLUGIN_PATHS
from hwtools.plugins.errors import ArgumentError, ManifestError
from hwtools.plugins.arguments import normalize_arguments
from hwtools.plugins.loader import load_manifest_file
from hwtools.plugins.registry import ToolRegistry
from hwtools.plugins.schema import function_definition

console = Console()
err_console = Console(stderr=True)


def load_or_exit(path: str):
    """Load a manifest, printing its issues and exiting on failure."""
    try:
        return load_manifest_file(Path(path))
    except ManifestError as e:
        err_console.print(f"[red]{type(e).__name__}[/red] in {e.source}:")
        for issue in e.issues:
            err_console.print(f"  - {issue}", markup=False)
        sys.exit(1)


def cmd_validate(args):
    """Validate a manifest and summarize it."""
    manifest = load_or_exit(args.path)

    console.print(f"[green]OK[/green] {manifest.name} {manifest.tool.version}")
    console.print(f"  Binary:    {manifest.exec.binary}", markup=False)
    if manifest.transport:
        console.print(
            f"  Transport: {manifest.transport.preferred.value} "
            f"(device required: {manifest.transport.device_required})"
        )

    if not manifest.parameters:
        console.print("  No parameters.")
        return

    table = Table(title="Parameters")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Required")
    table.add_column("Default")
    table.add_column("Description")
    for p in manifest.parameters:
        table.add_row(
            p.name,
            p.type.value,
            "Yes" if p.required else "No",
            json.dumps(p.default) if p.has_default else "",
            p.description,
        )
    console.print(table)


def cmd_schema(args):
    """Print the function-calling definition for a manifest."""
    manifest = load_or_exit(args.path)
    console.print_json(json.dumps(function_definition(manifest)))


def cmd_normalize(args):
    """Normalize a JSON argument object against a manifest."""
    manifest = load_or_exit(args.path)
    try:
        normalized = normalize_arguments(manifest, args.arguments)
    except ArgumentError as e:
        err_console.print_json(json.dumps(e.to_dict()))
        sys.exit(2)
    console.print_json(json.dumps(normalized))


def cmd_list(args):
    """List tools from the configured plugin directories."""
    if not PLUGIN_PATHS:
        console.print("No plugin paths configured (set HWTOOLS_PLUGIN_PATHS).")
        return

    registry = ToolRegistry()
    registry.load_plugins(PLUGIN_PATHS)

    table = Table(title="Tools")
    table.add_column("Name")
    table.add_column("Version")
    table.add_column("Transport")
    table.add_column("Binary")
    for t in registry.get_all():
        transport = t.manifest.transport
        table.add_row(
            t.name,
            t.manifest.tool.version,
            transport.preferred.value if transport else "-",
            str(t.binary_path),
        )
    console.print(table)

    failed = len(PLUGIN_PATHS) - registry.count()
    if failed:
        err_console.print(f"[yellow]{failed} plugin(s) failed to load, see log output.[/yellow]")
        sys.exit(1)


def main():
    parser = argparse.ArgumentParser(description="Hardware Tool Manager")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate a manifest")
    validate_parser.add_argument("path", help=f"Path to {MANIFEST_FILE} or its plugin directory")

    # schema
    schema_parser = subparsers.add_parser("schema", help="Print the model-facing schema")
    schema_parser.add_argument("path", help=f"Path to {MANIFEST_FILE} or its plugin directory")

    # normalize
    normalize_parser = subparsers.add_parser("normalize", help="Check tool-call arguments")
    normalize_parser.add_argument("path", help=f"Path to {MANIFEST_FILE} or its plugin directory")
    normalize_parser.add_argument("arguments", nargs="?", default="{}", help="JSON object of arguments")

    # list
    subparsers.add_parser("list", help="List configured tools")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    commands = {
        "validate": cmd_validate,
        "schema": cmd_schema,
        "normalize": cmd_normalize,
        "list": cmd_list,
    }

    commands[args.command](args)


if __name__ == "__main__":
    main()
