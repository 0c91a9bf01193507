"""Resolution of GraphQL queries against the schema."""

from __future__ import annotations

import json
import math
from typing import Any, Dict, Mapping

from minsql.execution.rows import Tuple
from minsql.graphql.schema import GraphQLSchema


def _sql_literal(value: Any) -> str:
    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, separators=(",", ":"))


class GraphQLResolver:
    """Resolves queries of a schema and shapes rows as JSON objects."""

    def __init__(self, schema: GraphQLSchema) -> None:
        self.schema = schema

    async def resolve_query(self, query_name: str, arguments: Mapping[str, Any]) -> Any:
        """Resolve the query ``query_name``; raise :class:`LookupError` if it is unknown."""
        query = self.schema.queries.get(query_name)
        if query is None:
            raise LookupError(f"Query not found: {query_name}")
        self.build_sql(query.sql_template, arguments)
        return None

    def build_sql(self, template: str, arguments: Mapping[str, Any]) -> str:
        """Replace each ``$name`` placeholder in ``template`` with its argument as SQL."""
        sql = template
        for key, value in arguments.items():
            sql = sql.replace(f"${key}", _sql_literal(value))
        return sql

    def tuple_to_json(self, row: Tuple, type_name: str) -> Dict[str, Any]:
        """Return the fields of type ``type_name`` that ``row`` has, keyed by field name."""
        gql_type = self.schema.types.get(type_name)
        if gql_type is None:
            raise LookupError(f"Type not found: {type_name}")
        obj: Dict[str, Any] = {}
        for fld in gql_type.fields:
            column = fld.column_mapping if fld.column_mapping is not None else fld.name
            if column not in row:
                continue
            value = row.values[column]
            if isinstance(value, float) and not math.isfinite(value):
                value = None
            obj[fld.name] = value
        return obj