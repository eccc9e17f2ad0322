"""Build search-index.json from a GraphQL introspection response.

Every named type becomes an entry keyed by its lowercased name. Fields,
input fields, and enum values become member entries pointing back at their
type. Enum values get a second alias without underscores so ``superadmin``
finds ``SUPER_ADMIN``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from docsearch.errors import SchemaError
from docsearch.models.index import IndexEntry, encode_index
from docsearch.models.introspection import FullType, IntrospectionResponse, Schema

log = structlog.get_logger()

# Wrapper kinds have no page of their own.
KIND_PREFIXES: dict[str, str | None] = {
    "OBJECT": "object",
    "INPUT_OBJECT": "input_object",
    "UNION": "union",
    "INTERFACE": "interface",
    "SCALAR": "scalar",
    "ENUM": "enum",
    "LIST": None,
    "NON_NULL": None,
}


def parse_schema(document: Any) -> Schema:
    try:
        return IntrospectionResponse.model_validate(document).data.schema_
    except ValidationError as exc:
        raise SchemaError(f"Not a GraphQL introspection response: {exc}") from exc


def build_index(schema: Schema) -> list[IndexEntry]:
    entries: list[IndexEntry] = []
    for full_type in schema.types:
        entries.extend(_type_entries(full_type))
    log.info("index_built", types=len(schema.types), entries=len(entries))
    return entries


def _type_entries(full_type: FullType) -> list[IndexEntry]:
    kind = KIND_PREFIXES[full_type.kind]
    if kind is None:
        return []

    name = full_type.name
    entries = [IndexEntry(aliases=[name.lower()], name=name, kind=kind)]

    for field in full_type.fields or []:
        entries.append(_member(field.name, "field", name, kind))
    for enum_value in full_type.enum_values or []:
        lowered = enum_value.name.lower()
        entries.append(
            _member(
                enum_value.name,
                "enum_value",
                name,
                kind,
                aliases=[lowered, lowered.replace("_", "")],
            )
        )
    for input_field in full_type.input_fields or []:
        entries.append(_member(input_field.name, "input_field", name, kind))
    return entries


def _member(
    name: str,
    kind: str,
    parent_name: str,
    parent_kind: str,
    aliases: list[str] | None = None,
) -> IndexEntry:
    return IndexEntry(
        aliases=aliases if aliases is not None else [name.lower()],
        name=name,
        kind=kind,
        parent_name=parent_name,
        parent_kind=parent_kind,
    )


def build_index_file(schema_path: Path, output: Path) -> int:
    """Read an introspection response from ``schema_path`` and write the index.

    The output directory is created when missing. Returns the entry count.
    """
    try:
        text = schema_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"Cannot read {schema_path}: {exc}") from exc
    try:
        document = json.loads(text)
    except ValueError as exc:
        raise SchemaError(f"{schema_path} is not valid JSON: {exc}") from exc

    entries = build_index(parse_schema(document))
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(
        json.dumps(encode_index(entries), separators=(",", ":")), encoding="utf-8"
    )
    return len(entries)
