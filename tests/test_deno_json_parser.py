from pathlib import Path

import pytest
from pydantic import ValidationError

from tsdoc_render.errors import ContractError, DocFormatError
from tsdoc_render.parser.base import (
    ArrayType,
    ClassNode,
    ConditionalType,
    EnumNode,
    FnOrConstructorType,
    FunctionNode,
    IndexedAccessType,
    InterfaceNode,
    LiteralType,
    NamespaceNode,
    NumberLiteral,
    OptionalType,
    ThisType,
    TypeLiteralType,
    TypeOperatorType,
    TypeQueryType,
    TypeRefType,
    VarDeclKind,
    VariableNode,
)
from tsdoc_render.parser.deno_json import load_nodes, parse_doc

FIXTURES = Path(__file__).parent / "fixtures"

LOC = {"filename": "mod.ts", "line": 1, "col": 0}


def _keyword(name: str) -> dict:
    return {"repr": name, "kind": "keyword", "keyword": name}


def _variable(ts_type: dict) -> dict:
    return {
        "kind": "variable",
        "name": "v",
        "location": LOC,
        "variableDef": {"kind": "var", "tsType": ts_type},
    }


def _load_type(ts_type: dict):
    return load_nodes([_variable(ts_type)])[0].variable_def.ts_type


class TestParseDoc:
    def test_parse_sample_count(self):
        nodes = parse_doc(FIXTURES / "sample_doc.json")
        assert len(nodes) == 6

    def test_parse_function(self):
        nodes = parse_doc(FIXTURES / "sample_doc.json")
        add = [n for n in nodes if n.name == "add"][0]
        assert isinstance(add, FunctionNode)
        assert add.location.filename == "mod.ts"
        assert add.js_doc.startswith("Adds two numbers")
        assert [p.name for p in add.function_def.params] == ["a", "b"]

    def test_parse_untyped_param(self):
        nodes = parse_doc(FIXTURES / "sample_doc.json")
        fetch_all = [n for n in nodes if n.name == "fetchAll"][0]
        assert fetch_all.function_def.params[1].ts_type is None
        assert fetch_all.function_def.is_async is True

    def test_parse_namespace_elements(self):
        nodes = parse_doc(FIXTURES / "sample_doc.json")
        util = [n for n in nodes if n.name == "Util"][0]
        assert isinstance(util, NamespaceNode)
        assert [e.name for e in util.namespace_def.elements] == ["VERSION", "clamp"]

    def test_parse_payloadless_kinds(self):
        nodes = parse_doc(FIXTURES / "sample_doc.json")
        parser = [n for n in nodes if n.name == "Parser"][0]
        assert isinstance(parser, ClassNode)

    def test_parse_yaml(self):
        nodes = parse_doc(FIXTURES / "sample_doc.yaml")
        assert isinstance(nodes[0], InterfaceNode)
        assert isinstance(nodes[1], EnumNode)
        assert nodes[1].js_doc is None

    def test_invalid_json_reported(self, tmp_path):
        f = tmp_path / "broken.json"
        f.write_text("[{")
        with pytest.raises(DocFormatError):
            parse_doc(f)


class TestLoadNodes:
    def test_top_level_must_be_list(self):
        with pytest.raises(DocFormatError):
            load_nodes({"kind": "class"})

    def test_unknown_node_kind(self):
        with pytest.raises(DocFormatError, match="unknown documentation node kind"):
            load_nodes([{"kind": "module", "name": "m", "location": LOC}])

    def test_function_without_function_def(self):
        with pytest.raises(ContractError) as exc_info:
            load_nodes([{"kind": "function", "name": "f", "location": LOC}])
        assert exc_info.value.kind == "function"
        assert exc_info.value.field == "functionDef"
        assert str(exc_info.value) == "function node 'f' is missing 'functionDef'"

    def test_function_without_return_type(self):
        with pytest.raises(ContractError, match="returnType"):
            load_nodes(
                [
                    {
                        "kind": "function",
                        "name": "f",
                        "location": LOC,
                        "functionDef": {"params": [], "returnType": None},
                    }
                ]
            )

    def test_variable_without_type(self):
        node = load_nodes(
            [
                {
                    "kind": "variable",
                    "name": "x",
                    "location": LOC,
                    "variableDef": {"kind": "const", "tsType": None},
                }
            ]
        )[0]
        assert isinstance(node, VariableNode)
        assert node.variable_def.kind is VarDeclKind.CONST
        assert node.variable_def.ts_type is None

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            load_nodes([{"kind": "class", "location": LOC}])

    def test_non_object_function_def(self):
        with pytest.raises(DocFormatError, match="functionDef"):
            load_nodes([{"kind": "function", "name": "f", "location": LOC, "functionDef": "f()"}])

    def test_non_object_param(self):
        with pytest.raises(DocFormatError, match="parameter"):
            load_nodes(
                [
                    {
                        "kind": "function",
                        "name": "f",
                        "location": LOC,
                        "functionDef": {"params": ["a"], "returnType": _keyword("void")},
                    }
                ]
            )


class TestLoadTypes:
    def test_non_object_type_expression(self):
        with pytest.raises(DocFormatError, match="type expression"):
            _load_type("string")

    def test_non_object_payload(self):
        with pytest.raises(DocFormatError, match="typeRef"):
            _load_type({"repr": "Foo", "kind": "typeRef", "typeRef": "Foo"})

    def test_non_list_union_payload(self):
        with pytest.raises(DocFormatError, match="union"):
            _load_type({"repr": "", "kind": "union", "union": {"kind": "keyword"}})

    def test_non_object_literal(self):
        with pytest.raises(DocFormatError, match="literal"):
            _load_type({"repr": "1", "kind": "literal", "literal": 1})

    def test_type_without_payload(self):
        with pytest.raises(ContractError) as exc_info:
            _load_type({"repr": "Foo", "kind": "typeRef"})
        assert exc_info.value.field == "typeRef"
        assert str(exc_info.value) == "typeRef type is missing 'typeRef'"

    def test_unknown_type_kind(self):
        with pytest.raises(DocFormatError):
            _load_type({"repr": "", "kind": "mapped"})

    def test_array(self):
        ts_type = _load_type({"repr": "", "kind": "array", "array": _keyword("string")})
        assert isinstance(ts_type, ArrayType)
        assert ts_type.element.keyword == "string"

    def test_conditional(self):
        ts_type = _load_type(
            {
                "repr": "",
                "kind": "conditional",
                "conditionalType": {
                    "checkType": _keyword("T"),
                    "extendsType": _keyword("string"),
                    "trueType": _keyword("true"),
                    "falseType": _keyword("false"),
                },
            }
        )
        assert isinstance(ts_type, ConditionalType)
        assert ts_type.false_type.keyword == "false"

    def test_constructor(self):
        ts_type = _load_type(
            {
                "repr": "",
                "kind": "fnOrConstructor",
                "fnOrConstructor": {
                    "constructor": True,
                    "tsType": _keyword("Foo"),
                    "params": [{"name": "a", "tsType": _keyword("number")}],
                },
            }
        )
        assert isinstance(ts_type, FnOrConstructorType)
        assert ts_type.constructor is True
        assert ts_type.params[0].name == "a"

    def test_indexed_access(self):
        ts_type = _load_type(
            {
                "repr": "",
                "kind": "indexedAccess",
                "indexedAccess": {"objType": _keyword("T"), "indexType": _keyword("K")},
            }
        )
        assert isinstance(ts_type, IndexedAccessType)

    def test_number_literal(self):
        ts_type = _load_type(
            {"repr": "1", "kind": "literal", "literal": {"kind": "number", "number": 1}}
        )
        assert isinstance(ts_type, LiteralType)
        assert isinstance(ts_type.literal, NumberLiteral)
        assert ts_type.literal.number == 1.0

    def test_literal_without_value(self):
        with pytest.raises(ContractError):
            _load_type({"repr": "", "kind": "literal", "literal": {"kind": "boolean"}})

    def test_false_boolean_literal_is_present(self):
        ts_type = _load_type(
            {"repr": "false", "kind": "literal", "literal": {"kind": "boolean", "boolean": False}}
        )
        assert ts_type.literal.boolean is False

    def test_optional_this_and_type_literal(self):
        assert isinstance(
            _load_type({"repr": "", "kind": "optional", "optional": _keyword("number")}),
            OptionalType,
        )
        assert isinstance(_load_type({"repr": "this", "kind": "this", "this": True}), ThisType)
        literal = _load_type({"repr": "{ a: number }", "kind": "typeLiteral", "typeLiteral": {}})
        assert isinstance(literal, TypeLiteralType)
        assert literal.repr == "{ a: number }"

    def test_type_operator_and_query(self):
        operator = _load_type(
            {
                "repr": "",
                "kind": "typeOperator",
                "typeOperator": {"operator": "keyof", "tsType": _keyword("T")},
            }
        )
        assert isinstance(operator, TypeOperatorType)
        assert operator.operator == "keyof"
        query = _load_type({"repr": "", "kind": "typeQuery", "typeQuery": "foo.bar"})
        assert isinstance(query, TypeQueryType)
        assert query.query == "foo.bar"

    def test_type_ref_keeps_empty_params(self):
        ts_type = _load_type(
            {"repr": "Foo", "kind": "typeRef", "typeRef": {"typeName": "Foo", "typeParams": []}}
        )
        assert isinstance(ts_type, TypeRefType)
        assert ts_type.type_params == []

    def test_type_ref_without_params(self):
        ts_type = _load_type(
            {"repr": "Foo", "kind": "typeRef", "typeRef": {"typeName": "Foo", "typeParams": None}}
        )
        assert ts_type.type_params is None
