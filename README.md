# minsql

The core of an intent-driven database engine. It is written in plain Python
and has no third-party dependencies.

Statements are held as a syntax tree. A semantic analyzer lowers them into
*intents*, which describe what the query wants rather than how to run it.
Intents are then evaluated against rows. Around that core the package
provides:

* a deterministic clock and scheduler for reproducible execution,
* query sandboxing,
* simple columnar and vectorized analytics,
* a query cache and materialized views,
* GraphQL schema generation from table names.

## Layout

| Module                                  | What it holds                                                           |
|-----------------------------------------|-------------------------------------------------------------------------|
| `minsql.config`                         | `Config`, built from command-line style arguments; `ConfigError`        |
| `minsql.language.syntax`                | statement and expression classes of the syntax tree                     |
| `minsql.language.intent`                | intent classes and the `ComparisonOp`, `LogicalOp`, `ArithmeticOp` enums |
| `minsql.language.semantic`              | `SemanticAnalyzer`, `SemanticError`                                     |
| `minsql.execution.rows`                 | `Tuple` and the helpers `as_int`, `as_float`, `as_str`, `as_bool`, `is_null` |
| `minsql.execution.expression`           | `ExpressionEvaluator`, `EvaluationError`                                |
| `minsql.execution.sandbox`              | `Sandbox`, `QueryLimits`, `QueryLimitExceeded`                          |
| `minsql.execution.operators.scan`       | `SeqScan`, `IndexScan`                                                  |
| `minsql.execution.operators.join`       | `HashJoin`, `NestedLoopJoin`                                            |
| `minsql.execution.operators.aggregate`  | `HashAggregate`                                                         |
| `minsql.execution.operators.mutate`     | `Insert`, `Update`, `Delete`                                            |
| `minsql.determinism.clock`              | `HybridLogicalClock`, `LogicalTime`, `ClockMode`                        |
| `minsql.determinism.scheduler`          | `DeterministicScheduler`, `Task`                                        |
| `minsql.determinism.replay`             | `ReplayEngine`                                                          |
| `minsql.analytics.columnar`             | `ColumnarStorage`                                                       |
| `minsql.analytics.vectorized`           | `VectorBatch`, `VectorizedExecutor`, `VECTOR_SIZE`                      |
| `minsql.analytics.query_cache`          | `QueryCache`, `CacheStats`                                              |
| `minsql.analytics.materialized_views`   | `MaterializedViewManager`, `MaterializedView`, `ViewNotFoundError`      |
| `minsql.graphql.schema`                 | schema classes, `generate_from_tables`, `generate_sdl`, `to_pascal_case` |
| `minsql.graphql.resolver`               | `GraphQLResolver`                                                       |
| `minsql.graphql.subscriptions`          | `GraphQLSubscriptionManager`                                            |

## Examples

### Configuration

`Config.from_args` reads `--node-id`, `--data-dir`, `--port` and `--peers`.
It ignores unknown arguments. With no argument list it reads `sys.argv[1:]`.
It raises `ConfigError` in these cases:

* a node id that is not an unsigned 32-bit number,
* a port that is not an unsigned 16-bit number,
* an option given without its value.

```python
from minsql.config import Config

config = Config.from_args(["--node-id", "2", "--port", "6000", "--peers", "a:1,b:2"])
config.node_id      # 2
config.port         # 6000
config.peers        # ["a:1", "b:2"]
config.data_path()  # Path("data"), from the default "./data"
```

### Rows

A `Tuple` maps column names to values. A value is `None` (NULL), a `bool`, an
`int`, a `float` or a `str`.

```python
from minsql.execution.rows import Tuple, as_int, is_null

row = Tuple()
row.insert("id", 7)
row.insert("nickname", None)

as_int(row.get("id"))          # 7
is_null(row.get("nickname"))   # True
sorted(row.columns())          # ["id", "nickname"]
```

### From statement to result

```python
from minsql.execution.expression import ExpressionEvaluator
from minsql.execution.rows import Tuple
from minsql.language.semantic import SemanticAnalyzer
from minsql.language.syntax import (
    BinaryOp, BinaryOperator, Column, Literal, RetrieveStatement, Star, TableRef,
)

statement = RetrieveStatement(
    projection=(Star(),),
    source=TableRef("users"),
    filter=BinaryOp(BinaryOperator.GREATER_THAN, Column("age"), Literal(21)),
)
intent = SemanticAnalyzer().analyze(statement)

evaluator = ExpressionEvaluator()
evaluator.evaluate_filter(intent.filter, Tuple({"age": 30}))  # True
```

### Deterministic time

A deterministic clock freezes the physical component. Only the logical
counter moves, so a replay sees the same timestamps every time.

```python
from minsql.determinism.clock import HybridLogicalClock

clock = HybridLogicalClock.deterministic(1_000)
clock.now()         # LogicalTime(logical=0, physical=1000)
clock.advance_by(5)
clock.now()         # LogicalTime(logical=6, physical=1000)
```

`HybridLogicalClock.realtime()` uses the wall clock in microseconds instead.

### GraphQL schemas from tables

```python
from minsql.graphql.schema import generate_from_tables, generate_sdl

schema = generate_from_tables(["user_accounts"])
print(generate_sdl(schema))
```

Each table becomes a type named in PascalCase, so `user_accounts` becomes
`UserAccounts`. Each type gets two queries:

* `get<Type>`, which takes a required `id`,
* `list<Type>s`, which takes optional `limit` and `offset`.

`GraphQLResolver.build_sql` fills the `$name` placeholders of a query's SQL
template. `tuple_to_json` shapes a row as a dict of a type's fields.

## Errors

Failures are raised as exceptions:

* `ConfigError` for bad arguments.
* `SemanticError` for statements that cannot become intents.
* `EvaluationError` for type mismatches, division by zero and unknown functions.
* `QueryLimitExceeded` when a sandboxed query runs past its limits.
* `ViewNotFoundError` for unknown materialized views.
* `LookupError` from `GraphQLResolver` for unknown queries or types.
* `KeyError` and `TypeError` from `ColumnarStorage` for unknown columns and mismatched value types.

## What the package does not do

* **No text parsing.** Statements are built directly as syntax-tree objects.
  There is no lexer or parser for query text.
* **No storage.** Nothing is written to disk. `SeqScan` yields ten sample
  rows in which `id`, `name` and `age` are filled in and any other column is
  NULL. `IndexScan` yields nothing.
* **No real mutations.** `Insert.execute` returns the number of rows it was
  given, and `Update.execute` and `Delete.execute` return 1. None of them
  changes any data.
* **No planner and no server.** The package has no query planner, no network
  server and no command-line program.
* **Replay has no log of its own.** `ReplayEngine.replay_wal` calls
  `wal_replay()` on whatever object it is given.
* **Operators are simplified.**
  * `HashAggregate` puts all rows in one group and counts rows rather than
    reading column values.
  * `HashJoin` matches rows on their `id` column and does not use its
    condition.
  * `NestedLoopJoin` yields the full cross product.
* **No GraphQL execution.** `GraphQLResolver.resolve_query` checks that the
  query exists, builds its SQL and returns `None`.
* **Views are not filled.** `MaterializedViewManager.refresh_view` only
  updates the refresh time, so a view holds no rows until they are put in
  its `data`.

## Running the tests

Install the `test` extra, then run `pytest`. The test suite uses pytest and
pytest-asyncio.