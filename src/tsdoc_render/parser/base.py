"""Unified data models for parsed documentation.

The loader converts the extractor's dump into these closed unions for
downstream rendering. Every union is discriminated on ``kind`` so a
variant always carries exactly its own payload.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True)


class Location(_Model):
    """Source position of a declaration (1-based)."""

    filename: str
    line: int
    col: int


class ParamDef(_Model):
    """A single function or constructor parameter."""

    name: str
    ts_type: "TsType | None" = None


# Literal payloads


class BooleanLiteral(_Model):
    kind: Literal["boolean"] = "boolean"
    boolean: bool


class StringLiteral(_Model):
    kind: Literal["string"] = "string"
    string: str


class NumberLiteral(_Model):
    kind: Literal["number"] = "number"
    number: float


LiteralDef = Annotated[
    Union[BooleanLiteral, StringLiteral, NumberLiteral],
    Field(discriminator="kind"),
]


# Type expressions


class ArrayType(_Model):
    kind: Literal["array"] = "array"
    element: "TsType"


class ConditionalType(_Model):
    kind: Literal["conditional"] = "conditional"
    check_type: "TsType"
    extends_type: "TsType"
    true_type: "TsType"
    false_type: "TsType"


class FnOrConstructorType(_Model):
    kind: Literal["fnOrConstructor"] = "fnOrConstructor"
    constructor: bool = False
    params: list[ParamDef] = []
    ts_type: "TsType"  # return type


class IndexedAccessType(_Model):
    kind: Literal["indexedAccess"] = "indexedAccess"
    obj_type: "TsType"
    index_type: "TsType"


class IntersectionType(_Model):
    kind: Literal["intersection"] = "intersection"
    types: list["TsType"] = []


class KeywordType(_Model):
    kind: Literal["keyword"] = "keyword"
    keyword: str


class LiteralType(_Model):
    kind: Literal["literal"] = "literal"
    literal: LiteralDef


class OptionalType(_Model):
    kind: Literal["optional"] = "optional"
    ts_type: "TsType"


class ParenthesizedType(_Model):
    kind: Literal["parenthesized"] = "parenthesized"
    ts_type: "TsType"


class RestType(_Model):
    kind: Literal["rest"] = "rest"
    ts_type: "TsType"


class ThisType(_Model):
    kind: Literal["this"] = "this"


class TupleType(_Model):
    kind: Literal["tuple"] = "tuple"
    types: list["TsType"] = []


class TypeLiteralType(_Model):
    """Object type literal, kept as the extractor's pre-rendered text."""

    kind: Literal["typeLiteral"] = "typeLiteral"
    repr: str


class TypeOperatorType(_Model):
    kind: Literal["typeOperator"] = "typeOperator"
    operator: str  # keyof / unique / readonly
    ts_type: "TsType"


class TypeQueryType(_Model):
    kind: Literal["typeQuery"] = "typeQuery"
    query: str


class TypeRefType(_Model):
    kind: Literal["typeRef"] = "typeRef"
    type_name: str
    type_params: list["TsType"] | None = None


class UnionType(_Model):
    kind: Literal["union"] = "union"
    types: list["TsType"] = []


TsType = Annotated[
    Union[
        ArrayType,
        ConditionalType,
        FnOrConstructorType,
        IndexedAccessType,
        IntersectionType,
        KeywordType,
        LiteralType,
        OptionalType,
        ParenthesizedType,
        RestType,
        ThisType,
        TupleType,
        TypeLiteralType,
        TypeOperatorType,
        TypeQueryType,
        TypeRefType,
        UnionType,
    ],
    Field(discriminator="kind"),
]


# Declarations


class VarDeclKind(str, Enum):
    CONST = "const"
    LET = "let"
    VAR = "var"


class FunctionDef(_Model):
    params: list[ParamDef] = []
    return_type: TsType
    is_async: bool = False
    is_generator: bool = False


class VariableDef(_Model):
    kind: VarDeclKind
    ts_type: TsType | None = None


class NamespaceDef(_Model):
    elements: list["DocNode"] = []


class _Node(_Model):
    name: str
    location: Location
    js_doc: str | None = None


class FunctionNode(_Node):
    kind: Literal["function"] = "function"
    function_def: FunctionDef


class VariableNode(_Node):
    kind: Literal["variable"] = "variable"
    variable_def: VariableDef


class ClassNode(_Node):
    kind: Literal["class"] = "class"


class EnumNode(_Node):
    kind: Literal["enum"] = "enum"


class InterfaceNode(_Node):
    kind: Literal["interface"] = "interface"


class TypeAliasNode(_Node):
    kind: Literal["typeAlias"] = "typeAlias"


class NamespaceNode(_Node):
    kind: Literal["namespace"] = "namespace"
    namespace_def: NamespaceDef = Field(default_factory=NamespaceDef)


DocNode = Annotated[
    Union[
        FunctionNode,
        VariableNode,
        ClassNode,
        EnumNode,
        InterfaceNode,
        TypeAliasNode,
        NamespaceNode,
    ],
    Field(discriminator="kind"),
]


for _model in (
    ParamDef,
    ArrayType,
    ConditionalType,
    FnOrConstructorType,
    IndexedAccessType,
    IntersectionType,
    OptionalType,
    ParenthesizedType,
    RestType,
    TupleType,
    TypeOperatorType,
    TypeRefType,
    UnionType,
    FunctionDef,
    VariableDef,
    NamespaceDef,
    NamespaceNode,
):
    _model.model_rebuild()
