from __future__ import annotations

from docsearch.models.index import IndexEntry, ScoredEntry, decode_index, encode_index
from docsearch.models.introspection import FullType, IntrospectionResponse, NamedMember, Schema

__all__ = [
    # index
    "IndexEntry",
    "ScoredEntry",
    "decode_index",
    "encode_index",
    # introspection
    "IntrospectionResponse",
    "Schema",
    "FullType",
    "NamedMember",
]
