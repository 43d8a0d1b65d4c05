"""Main CLI entry point."""

import logging
import sys
from pathlib import Path
from typing import Optional

import rich_click as click
from jsx2htm import __version__
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from jsx2htm.compiler.config import DEFAULT_TAG, CompileConfig
from jsx2htm.compiler.exceptions import Jsx2HtmError

console = Console()
err_console = Console(stderr=True)

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running 'jsx2htm --help' for more information."

# Cyan theme
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _report(error: Jsx2HtmError) -> None:
    err_console.print(f"[bold red]error[/] {escape(str(error))}")
    sys.exit(1)


def output_options(func):
    """Options shared by every command that emits templates."""
    func = click.option(
        "--import-export",
        default=None,
        help="Name exported by --import-module (defaults to the tag).",
    )(func)
    func = click.option(
        "--import-module",
        default=None,
        help="Module to import the tag from, e.g. 'htm/preact'.",
    )(func)
    func = click.option(
        "--html",
        "force_explicit_close",
        is_flag=True,
        help="Use explicit closing tags instead of self-closing elements.",
    )(func)
    func = click.option(
        "--tag", default=DEFAULT_TAG, show_default=True, help="Template tag identifier."
    )(func)
    func = click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")(func)
    return func


@click.group(
    help=f"""
[bold white on cyan] jsx2htm [/] [bold cyan]v{__version__}[/] Compile JSX into tagged templates.

Run [bold cyan]jsx2htm compile FILE[/] to transform one module.
Run [bold cyan]jsx2htm build SRC[/] to transform a source tree.
"""
)
@click.version_option(__version__)
def cli() -> None:
    pass


@cli.command(name="compile")
@click.argument("source", type=click.Path(dir_okay=False, allow_dash=True))
@click.option("-o", "--output", default=None, help="Write to a file instead of stdout.")
@output_options
def compile_command(
    source: str,
    output: Optional[str],
    verbose: bool,
    tag: str,
    force_explicit_close: bool,
    import_module: Optional[str],
    import_export: Optional[str],
) -> None:
    """Transform a single module. Use '-' to read from stdin."""
    from jsx2htm.compiler.imports import inject_import
    from jsx2htm.compiler.transform import transform_source

    _configure_logging(verbose)

    if source == "-":
        code = sys.stdin.read()
        file_path = "<stdin>"
    else:
        path = Path(source)
        if not path.exists():
            raise click.BadParameter(f"File '{source}' does not exist", param_hint="SOURCE")
        code = path.read_text(encoding="utf-8")
        file_path = source

    try:
        config = CompileConfig(tag=tag, force_explicit_close=force_explicit_close)
        result = transform_source(code, config, file_path=file_path)
        text = result.code
        if result.templates and import_module:
            text = inject_import(text, tag, import_module, import_export)
    except ValueError as e:
        raise click.BadParameter(str(e))
    except Jsx2HtmError as e:
        _report(e)
        return

    if output:
        Path(output).write_text(text, encoding="utf-8")
        err_console.print(
            f"✅ Wrote [cyan]{escape(output)}[/] ({result.templates} template(s))"
        )
    else:
        click.echo(text, nl=False)


@cli.command()
@click.argument("src_dir", type=click.Path(file_okay=False))
@click.option(
    "--out-dir",
    default="dist",
    show_default=True,
    help="Output directory for transformed sources.",
)
@output_options
def build(
    src_dir: str,
    out_dir: str,
    verbose: bool,
    tag: str,
    force_explicit_close: bool,
    import_module: Optional[str],
    import_export: Optional[str],
) -> None:
    """Transform every .jsx/.tsx/.js/.mjs file under SRC_DIR."""
    from jsx2htm.compiler.build import build_project

    _configure_logging(verbose)
    console.print(f"🔨 Building [cyan]{escape(src_dir)}[/]...")

    try:
        config = CompileConfig(tag=tag, force_explicit_close=force_explicit_close)
        summary = build_project(
            Path(src_dir),
            Path(out_dir),
            config,
            import_module=import_module,
            import_export=import_export,
        )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="SRC_DIR")
    except Jsx2HtmError as e:
        _report(e)
        return

    console.print(
        "✅ Build complete "
        f"(files={summary.files}, templates={summary.templates}, "
        f"out={escape(str(summary.out_dir))})"
    )


if __name__ == "__main__":
    cli()
