"""flowcanvas CLI — entry-point for canvas conversion and inspection.

Usage:
    python cli/main.py --help

Command groups:
    canvas    → convert between .canvas files and the visual-editor graph,
                list / tree views, node inputs and outputs
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from flowcanvas.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging

import typer

from flowcanvas import __version__
from flowcanvas.config import settings

from cli.commands.canvas import canvas_app

app = typer.Typer(
    name="flowcanvas",
    help="Convert JSON Canvas documents to and from a visual-editor graph.",
    no_args_is_help=True,
)
app.add_typer(canvas_app, name="canvas")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("version")
def version() -> None:
    """Print the installed flowcanvas version."""
    typer.echo(f"flowcanvas {__version__}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
