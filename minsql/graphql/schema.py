"""GraphQL schema description and generation from tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


@dataclass
class GraphQLField:
    name: str
    field_type: str
    nullable: bool
    column_mapping: Optional[str] = None


@dataclass
class GraphQLType:
    name: str
    fields: List[GraphQLField] = field(default_factory=list)
    table_mapping: Optional[str] = None


@dataclass
class GraphQLArgument:
    name: str
    arg_type: str
    required: bool


@dataclass
class GraphQLQuery:
    name: str
    return_type: str
    arguments: List[GraphQLArgument] = field(default_factory=list)
    sql_template: str = ""


@dataclass
class GraphQLMutation:
    name: str
    return_type: str
    arguments: List[GraphQLArgument] = field(default_factory=list)
    sql_template: str = ""


@dataclass
class GraphQLSubscription:
    name: str
    return_type: str
    trigger_table: str


@dataclass
class GraphQLSchema:
    types: Dict[str, GraphQLType] = field(default_factory=dict)
    queries: Dict[str, GraphQLQuery] = field(default_factory=dict)
    mutations: Dict[str, GraphQLMutation] = field(default_factory=dict)
    subscriptions: Dict[str, GraphQLSubscription] = field(default_factory=dict)


def to_pascal_case(text: str) -> str:
    """Join the ``_``-separated words of ``text``, each with its first letter upper-cased."""
    return "".join(word[:1].upper() + word[1:] for word in text.split("_"))


def generate_from_tables(tables: Iterable[str]) -> GraphQLSchema:
    """Build a schema with one type and a get and list query per table."""
    schema = GraphQLSchema()
    for table in tables:
        type_name = to_pascal_case(table)
        schema.types[type_name] = GraphQLType(
            name=type_name,
            fields=[GraphQLField("id", "ID", False, "id")],
            table_mapping=table,
        )
        get_name = f"get{type_name}"
        schema.queries[get_name] = GraphQLQuery(
            name=get_name,
            return_type=type_name,
            arguments=[GraphQLArgument("id", "ID", True)],
            sql_template=f"retrieve * from {table} where id = $id",
        )
        list_name = f"list{type_name}s"
        schema.queries[list_name] = GraphQLQuery(
            name=list_name,
            return_type=f"[{type_name}]",
            arguments=[
                GraphQLArgument("limit", "Int", False),
                GraphQLArgument("offset", "Int", False),
            ],
            sql_template=f"retrieve * from {table} limit $limit offset $offset",
        )
    return schema


def generate_sdl(schema: GraphQLSchema) -> str:
    """Render the types and queries of ``schema`` in GraphQL SDL."""
    parts: List[str] = []
    for gql_type in schema.types.values():
        parts.append(f"type {gql_type.name} {{\n")
        for fld in gql_type.fields:
            marker = "" if fld.nullable else "!"
            parts.append(f"  {fld.name}: {fld.field_type}{marker}\n")
        parts.append("}\n\n")

    parts.append("type Query {\n")
    for query in schema.queries.values():
        args = ", ".join(
            f"{arg.name}: {arg.arg_type}{'!' if arg.required else ''}" for arg in query.arguments
        )
        parts.append(f"  {query.name}({args}): {query.return_type}\n")
    parts.append("}\n")
    return "".join(parts)