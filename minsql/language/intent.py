"""Intents: what a statement asks for, after semantic analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from minsql.execution.rows import Value
from minsql.language.syntax import ColumnDefinition, JoinType


def _freeze(obj: object, *names: str) -> None:
    for name in names:
        object.__setattr__(obj, name, tuple(getattr(obj, name)))


class ComparisonOp(Enum):
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"


class LogicalOp(Enum):
    AND = "And"
    OR = "Or"
    NOT = "Not"


class ArithmeticOp(Enum):
    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"


# Expressions


@dataclass(frozen=True)
class ColumnRef:
    name: str


@dataclass(frozen=True)
class QualifiedColumnRef:
    table: str
    column: str


@dataclass(frozen=True)
class Constant:
    value: Value


@dataclass(frozen=True)
class Arithmetic:
    op: ArithmeticOp
    left: "ExpressionIntent"
    right: "ExpressionIntent"


@dataclass(frozen=True)
class FunctionCallIntent:
    name: str
    args: Tuple["ExpressionIntent", ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "args")


ExpressionIntent = Union[ColumnRef, QualifiedColumnRef, Constant, Arithmetic, FunctionCallIntent]


# Filters


@dataclass(frozen=True)
class AlwaysFilter:
    """Matches every row."""


@dataclass(frozen=True)
class NeverFilter:
    """Matches no row."""


@dataclass(frozen=True)
class Comparison:
    op: ComparisonOp
    left: ExpressionIntent
    right: ExpressionIntent


@dataclass(frozen=True)
class Logical:
    op: LogicalOp
    operands: Tuple["FilterIntent", ...]

    def __post_init__(self) -> None:
        _freeze(self, "operands")


FilterIntent = Union[AlwaysFilter, NeverFilter, Comparison, Logical]


# Projected columns


@dataclass(frozen=True)
class AllColumns:
    """Every column of the source."""


@dataclass(frozen=True)
class NamedColumn:
    name: str


@dataclass(frozen=True)
class QualifiedColumnIntent:
    table: str
    column: str


@dataclass(frozen=True)
class ExpressionColumn:
    expr: ExpressionIntent
    alias: Optional[str] = None


ColumnIntent = Union[AllColumns, NamedColumn, QualifiedColumnIntent, ExpressionColumn]


# Retrieval parts


@dataclass(frozen=True)
class JoinIntent:
    join_type: JoinType
    table: str
    condition: FilterIntent


@dataclass(frozen=True)
class SourceIntent:
    primary: str
    joins: Tuple[JoinIntent, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "joins")


@dataclass(frozen=True)
class AggregateIntent:
    function: str
    argument: ExpressionIntent
    alias: Optional[str] = None


@dataclass(frozen=True)
class OrderIntent:
    expr: ExpressionIntent
    ascending: bool = True


@dataclass(frozen=True)
class TimeTravelIntent:
    at_time: str
    until_time: Optional[str] = None


# Mutations


@dataclass(frozen=True)
class AssignmentIntent:
    column: str
    value: ExpressionIntent


@dataclass(frozen=True)
class InsertMutation:
    columns: Tuple[str, ...]
    values: Tuple[Tuple[Value, ...], ...]

    def __post_init__(self) -> None:
        _freeze(self, "columns")
        object.__setattr__(self, "values", tuple(tuple(row) for row in self.values))


@dataclass(frozen=True)
class UpdateMutation:
    assignments: Tuple[AssignmentIntent, ...]

    def __post_init__(self) -> None:
        _freeze(self, "assignments")


@dataclass(frozen=True)
class DeleteMutation:
    """Removes matching rows."""


MutationIntent = Union[InsertMutation, UpdateMutation, DeleteMutation]


# Schema changes


@dataclass(frozen=True)
class CreateTableIntent:
    name: str
    columns: Tuple[ColumnDefinition, ...]

    def __post_init__(self) -> None:
        _freeze(self, "columns")


@dataclass(frozen=True)
class CreateIndexIntent:
    name: str
    table: str
    columns: Tuple[str, ...]

    def __post_init__(self) -> None:
        _freeze(self, "columns")


@dataclass(frozen=True)
class DropTableIntent:
    name: str


SchemaIntent = Union[CreateTableIntent, CreateIndexIntent, DropTableIntent]


# Transactions


@dataclass(frozen=True)
class BeginTransaction:
    deterministic: bool = False
    at_timestamp: Optional[str] = None


@dataclass(frozen=True)
class CommitTransaction:
    """Commit the open transaction."""


@dataclass(frozen=True)
class RollbackTransaction:
    """Abandon the open transaction."""


TransactionIntent = Union[BeginTransaction, CommitTransaction, RollbackTransaction]


# Top-level intents


@dataclass(frozen=True)
class RetrieveIntent:
    columns: Tuple[ColumnIntent, ...]
    source: SourceIntent
    filter: Optional[FilterIntent] = None
    aggregates: Tuple[AggregateIntent, ...] = ()
    ordering: Tuple[OrderIntent, ...] = ()
    limit: Optional[int] = None
    time_travel: Optional[TimeTravelIntent] = None

    def __post_init__(self) -> None:
        _freeze(self, "columns", "aggregates", "ordering")


@dataclass(frozen=True)
class MutateIntent:
    operation: MutationIntent
    target: str
    filter: Optional[FilterIntent] = None


@dataclass(frozen=True)
class SchemaChange:
    operation: SchemaIntent


@dataclass(frozen=True)
class TransactionControl:
    operation: TransactionIntent


Intent = Union[RetrieveIntent, MutateIntent, SchemaChange, TransactionControl]