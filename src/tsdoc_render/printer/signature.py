"""One-line declaration signatures for documentation nodes."""

from typing import assert_never

from tsdoc_render.parser.base import (
    ClassNode,
    DocNode,
    EnumNode,
    FunctionNode,
    InterfaceNode,
    NamespaceNode,
    TypeAliasNode,
    VariableNode,
)
from tsdoc_render.printer.types import render_params, render_ts_type

INDENT = "  "


def indent(depth: int) -> str:
    return INDENT * depth


def render_signature(node: DocNode, depth: int = 0) -> str:
    """Render the signature line of a node at the given depth (no newline)."""
    match node:
        case FunctionNode():
            line = _function_signature(node)
        case VariableNode():
            line = _variable_signature(node)
        case ClassNode():
            line = f"class {node.name}"
        case EnumNode():
            line = f"enum {node.name}"
        case InterfaceNode():
            line = f"interface {node.name}"
        case TypeAliasNode():
            line = f"type {node.name}"
        case NamespaceNode():
            line = f"namespace {node.name}"
        case _:
            assert_never(node)
    return indent(depth) + line


def _function_signature(node: FunctionNode) -> str:
    function_def = node.function_def
    return "function {}({}): {}".format(
        node.name,
        render_params(function_def.params),
        render_ts_type(function_def.return_type),
    )


def _variable_signature(node: VariableNode) -> str:
    variable_def = node.variable_def
    line = f"{variable_def.kind.value} {node.name}"
    if variable_def.ts_type is not None:
        line += f": {render_ts_type(variable_def.ts_type)}"
    return line
