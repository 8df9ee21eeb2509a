"""Type expression and parameter rendering.

Both renderers are pure functions over the closed TsType union: the same
input always yields the same string.
"""

import math
from decimal import Decimal
from typing import assert_never

from tsdoc_render.parser.base import (
    ArrayType,
    BooleanLiteral,
    ConditionalType,
    FnOrConstructorType,
    IndexedAccessType,
    IntersectionType,
    KeywordType,
    LiteralDef,
    LiteralType,
    NumberLiteral,
    OptionalType,
    ParamDef,
    ParenthesizedType,
    RestType,
    StringLiteral,
    ThisType,
    TsType,
    TupleType,
    TypeLiteralType,
    TypeOperatorType,
    TypeQueryType,
    TypeRefType,
    UnionType,
)

# Rendered in place of the wrapped type of an optional type expression
OPTIONAL_PLACEHOLDER = "_optional_"


def render_params(params: list[ParamDef]) -> str:
    """Render a parameter list as ``name: type, name: type``."""
    rendered = []
    for param in params:
        if param.ts_type is not None:
            rendered.append(f"{param.name}: {render_ts_type(param.ts_type)}")
        else:
            rendered.append(param.name)
    return ", ".join(rendered)


def render_ts_type(ts_type: TsType) -> str:
    """Render a type expression to its canonical text."""
    match ts_type:
        case ArrayType(element=element):
            return f"{render_ts_type(element)}[]"
        case ConditionalType():
            return "{} extends {} ? {} : {}".format(
                render_ts_type(ts_type.check_type),
                render_ts_type(ts_type.extends_type),
                render_ts_type(ts_type.true_type),
                render_ts_type(ts_type.false_type),
            )
        case FnOrConstructorType():
            prefix = "new " if ts_type.constructor else ""
            return (
                f"{prefix}({render_params(ts_type.params)}) => "
                f"{render_ts_type(ts_type.ts_type)}"
            )
        case IndexedAccessType():
            return (
                f"{render_ts_type(ts_type.obj_type)}"
                f"[{render_ts_type(ts_type.index_type)}]"
            )
        case IntersectionType(types=types):
            return _join(types, " & ")
        case KeywordType(keyword=keyword):
            return keyword
        case LiteralType(literal=literal):
            return _render_literal(literal)
        case OptionalType():
            # The wrapped type is not rendered
            return OPTIONAL_PLACEHOLDER
        case ParenthesizedType():
            return f"({render_ts_type(ts_type.ts_type)})"
        case RestType():
            return f"...{render_ts_type(ts_type.ts_type)}"
        case ThisType():
            return "this"
        case TupleType(types=types):
            return _join(types, ", ")
        case TypeLiteralType():
            return ts_type.repr
        case TypeOperatorType():
            return f"{ts_type.operator} {render_ts_type(ts_type.ts_type)}"
        case TypeQueryType(query=query):
            return f"typeof {query}"
        case TypeRefType(type_name=name, type_params=type_params):
            if type_params:
                return f"{name}<{_join(type_params, ', ')}>"
            return name
        case UnionType(types=types):
            return _join(types, " | ")
        case _:
            assert_never(ts_type)


def _join(types: list[TsType], separator: str) -> str:
    return separator.join(render_ts_type(t) for t in types)


def _render_literal(literal: LiteralDef) -> str:
    match literal:
        case BooleanLiteral(boolean=value):
            return "true" if value else "false"
        case StringLiteral(string=value):
            return value
        case NumberLiteral(number=value):
            return format_number(value)
        case _:
            assert_never(literal)


def format_number(value: float) -> str:
    """Format a number in plain decimal form: ``1``, ``1.5``, ``0.0000001``, ``-0``.

    Digits are the shortest round-trip ones; exponent notation is never used.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
