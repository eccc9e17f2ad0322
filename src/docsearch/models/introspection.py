from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TypeKind = Literal[
    "NON_NULL", "LIST", "OBJECT", "INPUT_OBJECT", "UNION", "ENUM", "SCALAR", "INTERFACE"
]


class NamedMember(BaseModel):
    """A field, input field, or enum value. Only the name is indexed."""

    model_config = ConfigDict(extra="ignore")

    name: str


class FullType(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    kind: TypeKind
    name: str
    description: str | None = None
    fields: list[NamedMember] | None = None
    input_fields: list[NamedMember] | None = Field(default=None, alias="inputFields")
    enum_values: list[NamedMember] | None = Field(default=None, alias="enumValues")


class Schema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    types: list[FullType]


class SchemaData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    schema_: Schema = Field(alias="__schema")


class IntrospectionResponse(BaseModel):
    """``{"data": {"__schema": {...}}}`` as returned by an introspection query."""

    model_config = ConfigDict(extra="ignore")

    data: SchemaData
