"""Terminal printer — renders documentation nodes as plain text lines."""

from typing import Callable

import click

from tsdoc_render.parser.base import DocNode, NamespaceNode
from tsdoc_render.printer.jsdoc import format_js_doc
from tsdoc_render.printer.signature import render_signature

KIND_ORDER = {
    "function": 0,
    "variable": 1,
    "class": 2,
    "enum": 3,
    "interface": 4,
    "typeAlias": 5,
    "namespace": 6,
}


def sort_nodes(nodes: list[DocNode]) -> list[DocNode]:
    """Return a sorted copy of ``nodes``: by kind precedence, then by name."""
    return sorted(nodes, key=lambda node: (KIND_ORDER[node.kind], node.name))


def find_node(nodes: list[DocNode], name: str) -> DocNode | None:
    """Find a node by name. Dotted names descend into namespaces."""
    head, _, rest = name.partition(".")
    for node in nodes:
        if node.name != head:
            continue
        if not rest:
            return node
        if isinstance(node, NamespaceNode):
            found = find_node(node.namespace_def.elements, rest)
            if found is not None:
                return found
    return None


class TerminalPrinter:
    """Writes rendered documentation to a line sink.

    The sink receives one complete line per call, without the newline.
    """

    def __init__(self, sink: Callable[[str], None] | None = None):
        self.sink = sink or click.echo

    def render_tree(self, nodes: list[DocNode], depth: int = 0) -> None:
        """Print every node, sorted, recursing into namespace members."""
        for node in sort_nodes(nodes):
            self.sink(render_signature(node, depth))
            if node.js_doc is not None:
                self._emit(format_js_doc(node.js_doc, truncated=True, depth=depth))
            self.sink("")

            if isinstance(node, NamespaceNode):
                self.render_tree(node.namespace_def.elements, depth + 1)
                self.sink("")

    def render_detail(self, node: DocNode) -> None:
        """Print one node with its location and full comment."""
        location = node.location
        self.sink(f"Defined in {location.filename}:{location.line}:{location.col}.")
        self.sink("")
        self.sink(render_signature(node, 0))
        if node.js_doc is not None:
            self._emit(format_js_doc(node.js_doc, truncated=False, depth=0))

    def _emit(self, lines: list[str]) -> None:
        for line in lines:
            self.sink(line)
