"""Syntax tree of parsed statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from minsql.execution.rows import Value


def _freeze(obj: object, *names: str) -> None:
    for name in names:
        object.__setattr__(obj, name, tuple(getattr(obj, name)))


class DataType(Enum):
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    BIG_INT = "BigInt"
    REAL = "Real"
    DOUBLE = "Double"
    TEXT = "Text"
    TIMESTAMP = "Timestamp"


class JoinType(Enum):
    INNER = "Inner"
    LEFT = "Left"
    RIGHT = "Right"
    FULL = "Full"


class BinaryOperator(Enum):
    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"
    EQUALS = "Equals"
    NOT_EQUALS = "NotEquals"
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"
    AND = "And"
    OR = "Or"


class UnaryOperator(Enum):
    NOT = "Not"
    NEGATE = "Negate"


@dataclass(frozen=True)
class Column:
    name: str


@dataclass(frozen=True)
class QualifiedColumn:
    table: str
    column: str


@dataclass(frozen=True)
class Literal:
    value: Value


@dataclass(frozen=True)
class BinaryOp:
    op: BinaryOperator
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class UnaryOp:
    op: UnaryOperator
    operand: "Expression"


@dataclass(frozen=True)
class FunctionCall:
    name: str
    args: Tuple["Expression", ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "args")


@dataclass(frozen=True)
class Star:
    """The ``*`` projection."""


Expression = Union[Column, QualifiedColumn, Literal, BinaryOp, UnaryOp, FunctionCall, Star]


@dataclass(frozen=True)
class TableRef:
    table: str


@dataclass(frozen=True)
class AliasedTable:
    table: str
    alias: str


TableReference = Union[TableRef, AliasedTable]


@dataclass(frozen=True)
class JoinClause:
    join_type: JoinType
    table: TableReference
    on: Expression


@dataclass(frozen=True)
class OrderByClause:
    expr: Expression
    ascending: bool = True


@dataclass(frozen=True)
class ColumnDefinition:
    name: str
    data_type: DataType
    nullable: bool
    primary_key: bool


@dataclass(frozen=True)
class Assignment:
    column: str
    value: Expression


@dataclass(frozen=True)
class RetrieveStatement:
    projection: Tuple[Expression, ...]
    source: TableReference
    joins: Tuple[JoinClause, ...] = ()
    filter: Optional[Expression] = None
    group_by: Tuple[Expression, ...] = ()
    order_by: Tuple[OrderByClause, ...] = ()
    limit: Optional[int] = None
    offset: Optional[int] = None
    at_timestamp: Optional[str] = None
    until_timestamp: Optional[str] = None

    def __post_init__(self) -> None:
        _freeze(self, "projection", "joins", "group_by", "order_by")


@dataclass(frozen=True)
class InsertStatement:
    table: str
    columns: Tuple[str, ...]
    values: Tuple[Tuple[Expression, ...], ...]

    def __post_init__(self) -> None:
        _freeze(self, "columns")
        object.__setattr__(self, "values", tuple(tuple(row) for row in self.values))


@dataclass(frozen=True)
class UpdateStatement:
    table: str
    assignments: Tuple[Assignment, ...]
    filter: Optional[Expression] = None

    def __post_init__(self) -> None:
        _freeze(self, "assignments")


@dataclass(frozen=True)
class DeleteStatement:
    table: str
    filter: Optional[Expression] = None


@dataclass(frozen=True)
class CreateTableStatement:
    name: str
    columns: Tuple[ColumnDefinition, ...]

    def __post_init__(self) -> None:
        _freeze(self, "columns")


@dataclass(frozen=True)
class CreateIndexStatement:
    name: str
    table: str
    columns: Tuple[str, ...]

    def __post_init__(self) -> None:
        _freeze(self, "columns")


@dataclass(frozen=True)
class DropTableStatement:
    name: str


@dataclass(frozen=True)
class BeginTransactionStatement:
    deterministic: bool = False
    at_timestamp: Optional[str] = None


@dataclass(frozen=True)
class CommitStatement:
    """``COMMIT``."""


@dataclass(frozen=True)
class RollbackStatement:
    """``ROLLBACK``."""


Statement = Union[
    RetrieveStatement,
    InsertStatement,
    UpdateStatement,
    DeleteStatement,
    CreateTableStatement,
    CreateIndexStatement,
    DropTableStatement,
    BeginTransactionStatement,
    CommitStatement,
    RollbackStatement,
]