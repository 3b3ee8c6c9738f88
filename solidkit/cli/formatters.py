"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for lesson listings and conformance reports
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return json.dumps(data, indent=2, default=str)


def _plain(data: Any) -> Any:
    """Round-trip through JSON so YAML only sees plain types."""
    return json.loads(json.dumps(data, default=str))


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "lessons" in data and "passed" in data:
        return format_check_table(data["lessons"])
    elif isinstance(data, dict) and "lessons" in data:
        return format_lessons_table(data["lessons"])
    elif isinstance(data, dict):
        return format_key_value_table(data)
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    console = Console(record=True, width=120, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_lessons_table(lessons: List[Dict]) -> str:
    """Format the lesson listing as a table."""
    if not lessons:
        return "No lessons found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Principle", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Contract", style="blue")
    table.add_column("Consumer", style="blue")
    table.add_column("Variant", style="yellow")

    for lesson in lessons:
        table.add_row(
            lesson.get("principle", ""),
            lesson.get("title", ""),
            lesson.get("contract", ""),
            lesson.get("consumer", ""),
            lesson.get("variant", ""),
        )

    return _render(table)


def format_check_table(results: List[Dict]) -> str:
    """Format conformance results as a table."""
    if not results:
        return "No lessons checked."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Principle", style="cyan")
    table.add_column("Problem flagged", justify="center")
    table.add_column("Solution clean", justify="center")
    table.add_column("Substitutable", justify="center")
    table.add_column("Fail-fast", justify="center")
    table.add_column("Result", style="bold")

    def mark(value: bool) -> str:
        return "[green]yes[/green]" if value else "[red]no[/red]"

    for result in results:
        substitution = result.get("substitutability", {})
        table.add_row(
            result.get("principle", ""),
            mark(result.get("problem_flagged", False)),
            mark(not result.get("solution_violations")),
            mark(substitution.get("consistent", False) and substitution.get("distinct_effects", False)),
            mark(result.get("fail_fast", {}).get("passed", False)),
            "[green]PASS[/green]" if result.get("passed") else "[red]FAIL[/red]",
        )

    return _render(table)


def format_key_value_table(data: Dict[str, Any]) -> str:
    """Format a flat dictionary as a two-column table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    for key, value in data.items():
        if isinstance(value, (list, tuple)):
            value = "\n".join(str(item) for item in value)
        table.add_row(str(key), str(value))

    return _render(table)
