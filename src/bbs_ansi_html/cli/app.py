"""Typer CLI application."""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from bbs_ansi_html.core.constants import ESC
from bbs_ansi_html.core.options import ConvertOptions, Dialect


def _configure_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="bbs-ansi-html",
        help="Convert BBS-era ANSI artwork to HTML.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    def load_or_exit(path: Path):
        import bbs_ansi_html as ansi

        try:
            return ansi.load(path)
        except OSError as exc:
            console.print(f"[red]Cannot read {path}: {exc.strerror or exc}[/]")
            raise typer.Exit(1)

    @app.command()
    def convert(
        source: Annotated[Path, typer.Argument(help="Source ANSI file")],
        dest: Annotated[Optional[Path], typer.Argument(help="Destination HTML file (default: stdout)")] = None,
        pipe: Annotated[bool, typer.Option("--pipe", help="Interpret |NN pipe color codes")] = False,
        tilde: Annotated[bool, typer.Option("--tilde", help="Interpret ~X color codes")] = False,
        rtsoft: Annotated[bool, typer.Option("--rtsoft", help="Interpret `X RTSoft color codes")] = False,
        yankee: Annotated[bool, typer.Option("--yankee", help="Highlight Yankee-Trader screens")] = False,
        no_flatten: Annotated[bool, typer.Option("--no-flatten", help="Do not resolve cursor movement")] = False,
        width: Annotated[Optional[int], typer.Option("--width", "-w", min=1, help="Screen width (default: SAUCE or 80)")] = None,
        fragment: Annotated[bool, typer.Option("--fragment", help="Write only the styled body")] = False,
        title: Annotated[Optional[str], typer.Option("--title", "-t", help="Page title")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Convert ANSI art to an HTML page."""
        _configure_logging(verbose, console)
        doc = load_or_exit(source)

        flags = {
            Dialect.PIPE: pipe,
            Dialect.TILDE: tilde,
            Dialect.RTSOFT: rtsoft,
            Dialect.YANKEE: yankee,
        }
        options = ConvertOptions(
            dialects=frozenset(d for d, enabled in flags.items() if enabled),
            flatten=not no_flatten,
            width=width or doc.width,
        )

        if fragment:
            content = doc.render_to_html(options)
        else:
            content = doc.render_page(options, title=title or doc.title)

        if dest is None:
            sys.stdout.write(content)
            return

        try:
            dest.write_text(content, encoding='utf-8')
        except OSError as exc:
            console.print(f"[red]Cannot write {dest}: {exc.strerror or exc}[/]")
            raise typer.Exit(1)
        console.print(f"[green]Converted {source} → {dest}[/]")

    @app.command()
    def flatten(
        source: Annotated[Path, typer.Argument(help="Source ANSI file")],
        glyphs: Annotated[bool, typer.Option("--glyphs", "-g", help="Translate CP437 codes to Unicode")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Print the flattened stream with cursor movement resolved."""
        from bbs_ansi_html.codec.cp437 import translate_glyphs

        _configure_logging(verbose, console)
        stream = load_or_exit(source).flatten()
        if glyphs:
            stream = translate_glyphs(stream, keep=ESC + '\n')
        sys.stdout.write(stream + '\n')

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="ANSI file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show SAUCE metadata for an ANSI file."""
        doc = load_or_exit(path)

        if not doc.sauce:
            console.print(f"[yellow]No SAUCE metadata found in {path}[/]")
            raise typer.Exit(1)

        if json_output:
            print(json.dumps(doc.sauce.to_dict(), indent=2))
            return

        out = Console()
        out.print(f"[bold cyan]SAUCE Metadata for {path.name}[/]")
        out.print(f"  [bold]Title:[/]  {doc.sauce.title or '(none)'}")
        out.print(f"  [bold]Author:[/] {doc.sauce.author or '(none)'}")
        out.print(f"  [bold]Group:[/]  {doc.sauce.group or '(none)'}")
        if doc.sauce.date:
            out.print(f"  [bold]Date:[/]   {doc.sauce.date.strftime('%Y-%m-%d')}")
        out.print(f"  [bold]Size:[/]   {doc.sauce.tinfo1}x{doc.sauce.tinfo2}")
        if doc.sauce.comments:
            out.print("  [bold]Comments:[/]")
            for comment in doc.sauce.comments:
                out.print(f"    {comment}")

    return app
