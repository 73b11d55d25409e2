"""Typer CLI application for previewing cell buffers."""

import logging
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False


def configure_logging(verbose: bool) -> None:
    """Send termgrid's log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install termgrid[cli]")

    app = typer.Typer(
        name="termgrid",
        help="Preview and inspect terminal cell buffers.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def preview(
        cols: Annotated[Optional[int], typer.Option("--cols", "-c", min=0, help="Columns (default: terminal width)")] = None,
        rows: Annotated[Optional[int], typer.Option("--rows", "-r", min=0, help="Rows (default: terminal height)")] = None,
        resize: Annotated[Optional[str], typer.Option("--resize", help="Resize to COLSxROWS after drawing")] = None,
        mode: Annotated[str, typer.Option("--mode", "-m", help="Color mode: none, 8 or 256")] = "256",
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Print plain text without styling")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log buffer operations")] = False,
    ) -> None:
        """Draw a demonstration frame into a buffer and print it."""
        from termgrid.cli.demo import draw_demo, parse_size, terminal_size
        from termgrid.core.buffer import CellBuffer
        from termgrid.core.cell import Cell
        from termgrid.render.terminal import ColorMode, TerminalRenderer
        from termgrid.render.text import TextRenderer

        configure_logging(verbose)

        try:
            color_mode = ColorMode(mode)
        except ValueError:
            raise typer.BadParameter(f"Unknown color mode: {mode}", param_hint="--mode")

        term_cols, term_rows = terminal_size()
        buffer = CellBuffer(
            cols if cols is not None else term_cols,
            rows if rows is not None else term_rows,
            Cell(),
        )
        draw_demo(buffer)

        if resize is not None:
            try:
                new_cols, new_rows = parse_size(resize)
            except ValueError as e:
                raise typer.BadParameter(str(e), param_hint="--resize")
            buffer.resize(new_cols, new_rows, Cell.from_char("·"))

        if plain:
            print(TextRenderer(preserve_whitespace=True).render(buffer))
        else:
            print(TerminalRenderer(mode=color_mode).render(buffer))

    @app.command()
    def info(
        cols: Annotated[int, typer.Option("--cols", "-c", min=0, help="Columns")] = 80,
        rows: Annotated[int, typer.Option("--rows", "-r", min=0, help="Rows")] = 24,
    ) -> None:
        """Show the dimensions and cell count of a buffer."""
        from termgrid.core.buffer import CellBuffer

        buffer = CellBuffer(cols, rows)
        console.print("[bold cyan]Cell buffer[/]")
        console.print(f"  [bold]Size:[/]  {buffer.cols}x{buffer.rows}")
        console.print(f"  [bold]Cells:[/] {len(buffer)}")

    return app
