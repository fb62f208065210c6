"""Diagnostic tool for verifying reqview installation and resources."""

import socket
import sys
from importlib import import_module
from typing import Optional

from rich.console import Console
from rich.table import Table

from .exceptions import RenderError
from .models.config import DEFAULT_THEME
from .render.highlight import Highlighter


def check_dependency(module_name: str, package_name: Optional[str] = None) -> tuple[bool, str]:
    """
    Check if a Python module is importable.

    Args:
        module_name: Name of the module to import
        package_name: Display name of the package (defaults to module_name)

    Returns:
        Tuple of (success: bool, message: str)
    """
    display_name = package_name or module_name

    try:
        import_module(module_name)
        return True, f"[OK] {display_name}"
    except ImportError:
        return False, f"[MISSING] {display_name}"


def check_lexer(extension: str) -> tuple[bool, str]:
    """Check that a syntax definition exists for ``extension``."""
    try:
        lexer = Highlighter().get_lexer(extension)
        return True, f"[OK] Syntax for .{extension} ({lexer.name})"
    except RenderError as e:
        return False, f"[FAIL] {e}"


def check_theme(theme: Optional[str] = None) -> tuple[bool, str]:
    """Check that the highlighting theme exists."""
    highlighter = Highlighter(theme or DEFAULT_THEME)
    try:
        highlighter.check_theme()
        return True, f"[OK] Theme {highlighter.theme}"
    except RenderError as e:
        return False, f"[FAIL] {e}"


def check_network() -> tuple[bool, str]:
    """
    Check basic network connectivity.

    Returns:
        Tuple of (success: bool, message: str)
    """
    try:
        socket.gethostbyname("www.google.com")
        return True, "[OK] Network connectivity"
    except socket.gaierror:
        return False, "[WARN] Network connectivity - DNS resolution failed"
    except OSError as e:
        return False, f"[WARN] Network connectivity - {e}"


def run_doctor(console: Optional[Console] = None) -> int:
    """
    Run diagnostic checks and display results.

    Network problems are reported but do not fail the run.

    Returns:
        Exit code (0 if dependencies and highlighting resources are OK, 1 otherwise)
    """
    console = console or Console()
    console.print("Running reqview diagnostics...\n")

    core_checks = [
        ("aiohttp", "aiohttp"),
        ("charset_normalizer", "charset-normalizer"),
        ("pydantic", "pydantic"),
        ("pygments", "pygments"),
        ("rich", "rich"),
        ("yarl", "yarl"),
    ]

    core_results = [check_dependency(mod, pkg) for mod, pkg in core_checks]
    resource_results = [check_lexer("json"), check_lexer("html"), check_theme()]
    system_results = [check_network()]

    all_checks = {
        "Core Dependencies": core_results,
        "Highlighting": resource_results,
        "System": system_results,
    }

    for category, results in all_checks.items():
        table = Table(title=category, show_header=False, box=None)
        table.add_column("Status", style="bold")

        for success, message in results:
            style = "green" if success else ("yellow" if message.startswith("[WARN]") else "red")
            table.add_row(message, style=style)

        console.print(table)
        console.print()

    failed = any(not success for success, _ in core_results + resource_results)

    if failed:
        console.print("WARNING: Some checks failed!")
        console.print("\nRecommended fixes:")
        console.print("  1. For pipx users: pipx reinstall reqview --force")
        console.print("  2. For pip users: pip install --upgrade --force-reinstall reqview")
        console.print("  3. For development: pip install -e .\\[dev]")
        return 1

    console.print("All core dependencies and highlighting resources are available!")
    return 0


if __name__ == "__main__":
    sys.exit(run_doctor())
