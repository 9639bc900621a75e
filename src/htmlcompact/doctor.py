"""Diagnostic tool for verifying htmlcompact installation and clipboard support."""

import sys
from importlib import import_module
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .clipboard import find_clipboard_command


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


def check_clipboard(platform: Optional[str] = None) -> tuple[bool, str]:
    """
    Check that a clipboard command is installed.

    Returns:
        Tuple of (success: bool, message: str)
    """
    command = find_clipboard_command(platform)
    if command is None:
        return False, "[WARN] Clipboard - no clipboard command found (use --output or --stdout)"
    return True, f"[OK] Clipboard ({command[0]})"


def run_doctor(console: Optional[Console] = None) -> int:
    """
    Run diagnostic checks and display results.

    Args:
        console: Rich console to print to

    Returns:
        Exit code (0 if all core dependencies OK, 1 if any core dependency missing)
    """
    console = console or Console()
    console.print("Running htmlcompact diagnostics...\n")

    core_checks = [
        ("bs4", "beautifulsoup4"),
        ("pydantic", "pydantic"),
        ("yaml", "pyyaml"),
        ("rich", "rich"),
    ]
    core_results = [check_dependency(mod, pkg) for mod, pkg in core_checks]

    all_checks = {
        "Core Dependencies": core_results,
        "System": [check_clipboard()],
    }

    for category, results in all_checks.items():
        table = Table(title=category, show_header=False, box=None)
        table.add_column("Status", style="bold")

        for success, message in results:
            style = "green" if success else ("yellow" if "WARN" in message else "red")
            table.add_row(escape(message), style=style)

        console.print(table)
        console.print()

    if any(not success for success, _ in core_results):
        console.print("WARNING: Some core dependencies are missing!")
        console.print("  Reinstall with: pip install --upgrade --force-reinstall htmlcompact")
        return 1

    console.print("All core dependencies installed correctly!")
    return 0


if __name__ == "__main__":
    sys.exit(run_doctor())
