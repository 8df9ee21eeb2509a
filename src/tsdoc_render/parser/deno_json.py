"""Documentation dump parser.

Parses the JSON (or YAML) output of the documentation extractor into
DocNode models. The dump keeps one optional payload field per variant
(``functionDef``, ``typeRef``, ...); each node is collapsed here into the
single variant model its ``kind`` names.
"""

import json
from pathlib import Path

import yaml

from tsdoc_render.errors import ContractError, DocFormatError
from .base import (
    ArrayType,
    BooleanLiteral,
    ClassNode,
    ConditionalType,
    DocNode,
    EnumNode,
    FnOrConstructorType,
    FunctionDef,
    FunctionNode,
    IndexedAccessType,
    InterfaceNode,
    IntersectionType,
    KeywordType,
    LiteralDef,
    LiteralType,
    NamespaceDef,
    NamespaceNode,
    NumberLiteral,
    OptionalType,
    ParamDef,
    ParenthesizedType,
    RestType,
    StringLiteral,
    ThisType,
    TsType,
    TupleType,
    TypeAliasNode,
    TypeLiteralType,
    TypeOperatorType,
    TypeQueryType,
    TypeRefType,
    UnionType,
    VariableDef,
    VariableNode,
)
from .detect import detect_format

# Payload field carried by each type-expression kind in the dump
TYPE_PAYLOAD_FIELDS = {
    "array": "array",
    "conditional": "conditionalType",
    "fnOrConstructor": "fnOrConstructor",
    "indexedAccess": "indexedAccess",
    "intersection": "intersection",
    "keyword": "keyword",
    "literal": "literal",
    "optional": "optional",
    "parenthesized": "parenthesized",
    "rest": "rest",
    "tuple": "tuple",
    "typeOperator": "typeOperator",
    "typeQuery": "typeQuery",
    "typeRef": "typeRef",
    "union": "union",
}

OBJECT_PAYLOADS = {"conditional", "fnOrConstructor", "indexedAccess", "typeOperator", "typeRef"}
LIST_PAYLOADS = {"intersection", "tuple", "union"}

# Kinds whose payload the renderer never reads
PAYLOADLESS_NODES = {
    "class": ClassNode,
    "enum": EnumNode,
    "interface": InterfaceNode,
    "typeAlias": TypeAliasNode,
}


def parse_doc(file_path: Path, fmt: str = "auto") -> list[DocNode]:
    """Parse a documentation dump file into a list of DocNode."""
    if fmt == "auto":
        fmt = detect_format(file_path)

    text = file_path.read_text(encoding="utf-8")
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DocFormatError(f"{file_path}: invalid JSON ({e})") from e
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DocFormatError(f"{file_path}: invalid YAML ({e})") from e

    return load_nodes(data)


def load_nodes(data: list[dict]) -> list[DocNode]:
    """Convert already-decoded dump data into DocNode models."""
    if not isinstance(data, list):
        raise DocFormatError(
            f"expected a list of documentation nodes, got {type(data).__name__}"
        )
    return [_parse_node(item) for item in data]


def _parse_node(item: dict) -> DocNode:
    if not isinstance(item, dict):
        raise DocFormatError(f"expected a documentation node object, got {item!r}")

    kind = item.get("kind")
    name = item.get("name")
    common = {
        "name": name,
        "location": item.get("location"),
        "js_doc": item.get("jsDoc"),
    }

    match kind:
        case "function":
            function_def = _require(item, "functionDef", kind, name)
            return FunctionNode(
                **common, function_def=_parse_function_def(function_def, name)
            )
        case "variable":
            variable_def = _expect_object(
                _require(item, "variableDef", kind, name), "variableDef"
            )
            ts_type = variable_def.get("tsType")
            return VariableNode(
                **common,
                variable_def=VariableDef(
                    kind=variable_def.get("kind"),
                    ts_type=_parse_ts_type(ts_type) if ts_type is not None else None,
                ),
            )
        case "namespace":
            namespace_def = _expect_object(
                _require(item, "namespaceDef", kind, name), "namespaceDef"
            )
            return NamespaceNode(
                **common,
                namespace_def=NamespaceDef(
                    elements=load_nodes(namespace_def.get("elements", []))
                ),
            )
        case _ if kind in PAYLOADLESS_NODES:
            return PAYLOADLESS_NODES[kind](**common)
        case _:
            raise DocFormatError(f"unknown documentation node kind: {kind!r}")


def _parse_function_def(data: dict, name: str | None) -> FunctionDef:
    _expect_object(data, "functionDef")
    return_type = _require(data, "returnType", "function", name)
    return FunctionDef(
        params=_parse_params(data.get("params", [])),
        return_type=_parse_ts_type(return_type),
        is_async=data.get("isAsync", False),
        is_generator=data.get("isGenerator", False),
    )


def _parse_params(params: list[dict]) -> list[ParamDef]:
    result = []
    for p in params:
        _expect_object(p, "parameter")
        ts_type = p.get("tsType")
        result.append(
            ParamDef(
                name=p.get("name"),
                ts_type=_parse_ts_type(ts_type) if ts_type is not None else None,
            )
        )
    return result


def _parse_ts_type(data: dict) -> TsType:
    """Recursively collapse a dump type expression into its variant model."""
    _expect_object(data, "type expression")
    kind = data.get("kind")

    # Variants without a payload field
    if kind == "this":
        return ThisType()
    if kind == "typeLiteral":
        return TypeLiteralType(repr=data.get("repr", ""))

    if kind not in TYPE_PAYLOAD_FIELDS:
        raise DocFormatError(f"unknown type expression kind: {kind!r}")
    payload = _require(data, TYPE_PAYLOAD_FIELDS[kind], kind)
    if kind in OBJECT_PAYLOADS:
        _expect_object(payload, kind)
    elif kind in LIST_PAYLOADS:
        _expect_list(payload, kind)

    match kind:
        case "array":
            return ArrayType(element=_parse_ts_type(payload))
        case "conditional":
            return ConditionalType(
                check_type=_parse_ts_type(_require(payload, "checkType", kind)),
                extends_type=_parse_ts_type(_require(payload, "extendsType", kind)),
                true_type=_parse_ts_type(_require(payload, "trueType", kind)),
                false_type=_parse_ts_type(_require(payload, "falseType", kind)),
            )
        case "fnOrConstructor":
            return FnOrConstructorType(
                constructor=payload.get("constructor", False),
                params=_parse_params(payload.get("params", [])),
                ts_type=_parse_ts_type(_require(payload, "tsType", kind)),
            )
        case "indexedAccess":
            return IndexedAccessType(
                obj_type=_parse_ts_type(_require(payload, "objType", kind)),
                index_type=_parse_ts_type(_require(payload, "indexType", kind)),
            )
        case "intersection":
            return IntersectionType(types=[_parse_ts_type(t) for t in payload])
        case "keyword":
            return KeywordType(keyword=payload)
        case "literal":
            return LiteralType(literal=_parse_literal(payload))
        case "optional":
            return OptionalType(ts_type=_parse_ts_type(payload))
        case "parenthesized":
            return ParenthesizedType(ts_type=_parse_ts_type(payload))
        case "rest":
            return RestType(ts_type=_parse_ts_type(payload))
        case "tuple":
            return TupleType(types=[_parse_ts_type(t) for t in payload])
        case "typeOperator":
            return TypeOperatorType(
                operator=_require(payload, "operator", kind),
                ts_type=_parse_ts_type(_require(payload, "tsType", kind)),
            )
        case "typeQuery":
            return TypeQueryType(query=payload)
        case "typeRef":
            type_params = payload.get("typeParams")
            if type_params is not None:
                _expect_list(type_params, "typeParams")
            return TypeRefType(
                type_name=_require(payload, "typeName", kind),
                type_params=(
                    [_parse_ts_type(t) for t in type_params]
                    if type_params is not None
                    else None
                ),
            )
        case "union":
            return UnionType(types=[_parse_ts_type(t) for t in payload])


def _parse_literal(data: dict) -> LiteralDef:
    _expect_object(data, "literal")
    kind = data.get("kind")
    match kind:
        case "boolean":
            return BooleanLiteral(boolean=_require(data, "boolean", "boolean literal"))
        case "string":
            return StringLiteral(string=_require(data, "string", "string literal"))
        case "number":
            return NumberLiteral(number=_require(data, "number", "number literal"))
        case _:
            raise DocFormatError(f"unknown literal kind: {kind!r}")


def _require(data: dict, field: str, kind: str, name: str | None = None):
    """Return ``data[field]``, failing loudly when the payload is absent."""
    value = data.get(field)
    if value is None:
        raise ContractError(kind, field, name)
    return value


def _expect_object(value, what: str) -> dict:
    if not isinstance(value, dict):
        raise DocFormatError(f"expected {what} to be an object, got {value!r}")
    return value


def _expect_list(value, what: str) -> list:
    if not isinstance(value, list):
        raise DocFormatError(f"expected {what} to be a list, got {value!r}")
    return value
