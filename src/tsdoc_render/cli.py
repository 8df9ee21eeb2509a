"""CLI entry point for tsdoc-render."""

from pathlib import Path

import click
from pydantic import ValidationError

from tsdoc_render.errors import TsdocRenderError
from tsdoc_render.parser.base import DocNode
from tsdoc_render.parser.deno_json import parse_doc
from tsdoc_render.printer.terminal import TerminalPrinter, find_node

FORMATS = ["auto", "json", "yaml"]


def _parse_doc(ctx: click.Context, doc_path: Path, fmt: str) -> list[DocNode]:
    """Parse the dump, reporting bad input as a CLI error."""
    _progress(ctx, f"Parsing {doc_path} (format: {fmt})...")
    try:
        nodes = parse_doc(doc_path, fmt)
    except (TsdocRenderError, ValidationError) as e:
        raise click.ClickException(f"Cannot load {doc_path}: {e}") from e
    _progress(ctx, f"Found {len(nodes)} nodes.")
    return nodes


def _progress(ctx: click.Context, message: str) -> None:
    if ctx.obj and ctx.obj.get("verbose"):
        click.echo(message, err=True)


def _write_lines(lines: list[str], output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text("".join(line + "\n" for line in lines), encoding="utf-8")


@click.group(context_settings={"auto_envvar_prefix": "TSDOC_RENDER"})
@click.option("-v", "--verbose", is_flag=True, help="Report progress on stderr.")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """tsdoc-render — print documentation dumps as plain text signatures."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command("print")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the rendered text to this file instead of stdout.")
@click.option("--format", "fmt", default="auto", type=click.Choice(FORMATS), help="Dump format.")
@click.pass_context
def print_(ctx: click.Context, doc_path: Path, output: Path | None, fmt: str):
    """Print every documented node, sorted and grouped by kind."""
    nodes = _parse_doc(ctx, doc_path, fmt)

    if output is None:
        TerminalPrinter().render_tree(nodes)
        return

    lines: list[str] = []
    TerminalPrinter(sink=lines.append).render_tree(nodes)
    _write_lines(lines, output)
    _progress(ctx, f"Output saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("name")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the rendered text to this file instead of stdout.")
@click.option("--format", "fmt", default="auto", type=click.Choice(FORMATS), help="Dump format.")
@click.pass_context
def details(ctx: click.Context, doc_path: Path, name: str, output: Path | None, fmt: str):
    """Print the full documentation of one node (dotted names reach into namespaces)."""
    nodes = _parse_doc(ctx, doc_path, fmt)

    node = find_node(nodes, name)
    if node is None:
        raise click.ClickException(f"Node {name} was not found.")

    if output is None:
        TerminalPrinter().render_detail(node)
        return

    lines: list[str] = []
    TerminalPrinter(sink=lines.append).render_detail(node)
    _write_lines(lines, output)
    _progress(ctx, f"Output saved to {output}")
