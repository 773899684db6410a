"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML output
- Rich Unicode tables for instance listings
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, default_style=None)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "instances" in data:
        return format_instances_table(data["instances"])
    elif isinstance(data, dict) and "filter" in data:
        return format_filter_table(data["filter"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "instances" in data:
        return format_instances_list(data["instances"])
    elif isinstance(data, dict) and "filter" in data:
        return format_filter_list(data["filter"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_instances_table(instances: List[Dict]) -> str:
    """Format instances as a Rich table."""
    if not instances:
        return "No instances found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="green")
    table.add_column("Instance ID", style="cyan")

    for instance in instances:
        table.add_row(instance.get("name") or "-", instance.get("id", "N/A"))

    return _render(table)


def format_filter_table(identifier_filter: Dict) -> str:
    """Format a classified identifier filter as a Rich table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Kind", style="yellow")
    table.add_column("Filter", style="blue")
    table.add_column("Value", style="cyan")
    table.add_row(
        str(identifier_filter.get("kind", "N/A")),
        str(identifier_filter.get("filter", "N/A")),
        str(identifier_filter.get("value", "N/A")),
    )
    return _render(table)


def format_instances_list(instances: List[Dict]) -> str:
    """Format instances as one "id<TAB>name" line each."""
    if not instances:
        return "No instances found."
    return "\n".join(f"{i.get('id', 'N/A')}\t{i.get('name', '')}" for i in instances)


def format_filter_list(identifier_filter: Dict) -> str:
    """Format a classified identifier filter as key/value lines."""
    return "\n".join([
        f"Kind: {identifier_filter.get('kind', 'N/A')}",
        f"Filter: {identifier_filter.get('filter', 'N/A')}",
        f"Value: {identifier_filter.get('value', 'N/A')}",
    ])
