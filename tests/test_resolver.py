import math

import pytest

from minsql.execution.rows import Tuple
from minsql.graphql.resolver import GraphQLResolver
from minsql.graphql.schema import (
    GraphQLField,
    GraphQLSchema,
    GraphQLType,
    generate_from_tables,
)


@pytest.fixture
def resolver():
    return GraphQLResolver(generate_from_tables(["users"]))


def test_build_sql_integer(resolver):
    sql = resolver.build_sql("retrieve * from users where id = $id", {"id": 5})
    assert sql == "retrieve * from users where id = 5"


def test_build_sql_string_is_quoted(resolver):
    sql = resolver.build_sql("where name = $name", {"name": "ann"})
    assert sql == "where name = 'ann'"


def test_build_sql_bool_and_null(resolver):
    sql = resolver.build_sql("$a $b", {"a": True, "b": None})
    assert sql == "true null"


def test_build_sql_float_and_list(resolver):
    sql = resolver.build_sql("$x $y", {"x": 1.5, "y": [1, 2]})
    assert sql == "1.5 [1,2]"


def test_build_sql_leaves_unknown_placeholders(resolver):
    sql = resolver.build_sql("limit $limit offset $offset", {"limit": 10})
    assert sql == "limit 10 offset $offset"


@pytest.mark.asyncio
async def test_resolve_known_query(resolver):
    assert await resolver.resolve_query("getUsers", {"id": 1}) is None


@pytest.mark.asyncio
async def test_resolve_unknown_query(resolver):
    with pytest.raises(LookupError, match="Query not found: nothing"):
        await resolver.resolve_query("nothing", {})


def _people_resolver():
    schema = GraphQLSchema(
        types={
            "Person": GraphQLType(
                "Person",
                [
                    GraphQLField("id", "ID", False, "id"),
                    GraphQLField("fullName", "String", True, "full_name"),
                    GraphQLField("score", "Float", True),
                    GraphQLField("email", "String", True),
                ],
            )
        }
    )
    return GraphQLResolver(schema)


def test_tuple_to_json_maps_columns():
    row = Tuple({"id": 7, "full_name": "Ann", "score": 2.5})
    assert _people_resolver().tuple_to_json(row, "Person") == {
        "id": 7,
        "fullName": "Ann",
        "score": 2.5,
    }


def test_tuple_to_json_non_finite_float_is_null():
    row = Tuple({"score": math.nan})
    assert _people_resolver().tuple_to_json(row, "Person") == {"score": None}


def test_tuple_to_json_keeps_explicit_null():
    row = Tuple({"email": None})
    assert _people_resolver().tuple_to_json(row, "Person") == {"email": None}


def test_tuple_to_json_unknown_type(resolver):
    with pytest.raises(LookupError, match="Type not found: Ghost"):
        resolver.tuple_to_json(Tuple(), "Ghost")