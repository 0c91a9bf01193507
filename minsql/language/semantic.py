"""Semantic analysis: turning parsed statements into intents."""

from __future__ import annotations

from typing import Dict, Tuple

from minsql.language.intent import (
    AllColumns,
    Arithmetic,
    ArithmeticOp,
    AssignmentIntent,
    BeginTransaction,
    ColumnIntent,
    ColumnRef,
    CommitTransaction,
    Comparison,
    ComparisonOp,
    Constant,
    CreateIndexIntent,
    CreateTableIntent,
    DeleteMutation,
    DropTableIntent,
    ExpressionColumn,
    ExpressionIntent,
    FilterIntent,
    FunctionCallIntent,
    InsertMutation,
    Intent,
    JoinIntent,
    Logical,
    LogicalOp,
    MutateIntent,
    NamedColumn,
    OrderIntent,
    QualifiedColumnIntent,
    QualifiedColumnRef,
    RetrieveIntent,
    RollbackTransaction,
    SchemaChange,
    SourceIntent,
    TimeTravelIntent,
    TransactionControl,
    UpdateMutation,
)
from minsql.language.syntax import (
    AliasedTable,
    BeginTransactionStatement,
    BinaryOp,
    BinaryOperator,
    Column,
    CommitStatement,
    CreateIndexStatement,
    CreateTableStatement,
    DeleteStatement,
    DropTableStatement,
    Expression,
    FunctionCall,
    InsertStatement,
    JoinClause,
    Literal,
    OrderByClause,
    QualifiedColumn,
    RetrieveStatement,
    RollbackStatement,
    Star,
    Statement,
    TableRef,
    TableReference,
    UnaryOp,
    UnaryOperator,
    UpdateStatement,
)
from minsql.execution.rows import Value


class SemanticError(ValueError):
    """Raised when a statement cannot be turned into an intent."""


_COMPARISONS: Dict[BinaryOperator, ComparisonOp] = {
    BinaryOperator.EQUALS: ComparisonOp.EQUAL,
    BinaryOperator.NOT_EQUALS: ComparisonOp.NOT_EQUAL,
    BinaryOperator.LESS_THAN: ComparisonOp.LESS_THAN,
    BinaryOperator.LESS_THAN_OR_EQUAL: ComparisonOp.LESS_THAN_OR_EQUAL,
    BinaryOperator.GREATER_THAN: ComparisonOp.GREATER_THAN,
    BinaryOperator.GREATER_THAN_OR_EQUAL: ComparisonOp.GREATER_THAN_OR_EQUAL,
}

_LOGICAL: Dict[BinaryOperator, LogicalOp] = {
    BinaryOperator.AND: LogicalOp.AND,
    BinaryOperator.OR: LogicalOp.OR,
}

_ARITHMETIC: Dict[BinaryOperator, ArithmeticOp] = {
    BinaryOperator.ADD: ArithmeticOp.ADD,
    BinaryOperator.SUBTRACT: ArithmeticOp.SUBTRACT,
    BinaryOperator.MULTIPLY: ArithmeticOp.MULTIPLY,
    BinaryOperator.DIVIDE: ArithmeticOp.DIVIDE,
}


class SemanticAnalyzer:
    """Maps statements of the syntax tree to the intents they express."""

    def analyze(self, statement: Statement) -> Intent:
        """Return the intent of ``statement``; raise :class:`SemanticError` if invalid."""
        match statement:
            case RetrieveStatement():
                return self._retrieve(statement)
            case InsertStatement():
                return self._insert(statement)
            case UpdateStatement():
                return self._update(statement)
            case DeleteStatement():
                return MutateIntent(
                    DeleteMutation(), statement.table, self._optional_filter(statement.filter)
                )
            case CreateTableStatement():
                return SchemaChange(CreateTableIntent(statement.name, statement.columns))
            case CreateIndexStatement():
                return SchemaChange(
                    CreateIndexIntent(statement.name, statement.table, statement.columns)
                )
            case DropTableStatement():
                return SchemaChange(DropTableIntent(statement.name))
            case BeginTransactionStatement():
                return TransactionControl(
                    BeginTransaction(statement.deterministic, statement.at_timestamp)
                )
            case CommitStatement():
                return TransactionControl(CommitTransaction())
            case RollbackStatement():
                return TransactionControl(RollbackTransaction())
            case _:
                raise SemanticError(f"Unsupported statement: {statement!r}")

    def _retrieve(self, stmt: RetrieveStatement) -> RetrieveIntent:
        columns = self._projection(stmt.projection)
        source = SourceIntent(
            self._table_name(stmt.source),
            tuple(self._join(join) for join in stmt.joins),
        )
        filter_intent = self._optional_filter(stmt.filter)
        ordering = tuple(self._order_by(order) for order in stmt.order_by)
        time_travel = (
            TimeTravelIntent(stmt.at_timestamp, stmt.until_timestamp)
            if stmt.at_timestamp is not None
            else None
        )
        return RetrieveIntent(
            columns=columns,
            source=source,
            filter=filter_intent,
            aggregates=(),
            ordering=ordering,
            limit=stmt.limit,
            time_travel=time_travel,
        )

    def _insert(self, stmt: InsertStatement) -> MutateIntent:
        values = tuple(tuple(self._constant(expr) for expr in row) for row in stmt.values)
        return MutateIntent(InsertMutation(stmt.columns, values), stmt.table, None)

    def _update(self, stmt: UpdateStatement) -> MutateIntent:
        assignments = tuple(
            AssignmentIntent(a.column, self._expression(a.value)) for a in stmt.assignments
        )
        return MutateIntent(
            UpdateMutation(assignments), stmt.table, self._optional_filter(stmt.filter)
        )

    def _projection(self, projection: Tuple[Expression, ...]) -> Tuple[ColumnIntent, ...]:
        columns = []
        for expr in projection:
            match expr:
                case Star():
                    columns.append(AllColumns())
                case Column(name=name):
                    columns.append(NamedColumn(name))
                case QualifiedColumn(table=table, column=column):
                    columns.append(QualifiedColumnIntent(table, column))
                case _:
                    columns.append(ExpressionColumn(self._expression(expr), None))
        return tuple(columns)

    def _join(self, join: JoinClause) -> JoinIntent:
        return JoinIntent(join.join_type, self._table_name(join.table), self._filter(join.on))

    def _optional_filter(self, expr: "Expression | None") -> "FilterIntent | None":
        return None if expr is None else self._filter(expr)

    def _filter(self, expr: Expression) -> FilterIntent:
        if isinstance(expr, BinaryOp):
            left = self._expression(expr.left)
            right = self._expression(expr.right)
            if expr.op in _COMPARISONS:
                return Comparison(_COMPARISONS[expr.op], left, right)
            if expr.op in _LOGICAL:
                return Logical(
                    _LOGICAL[expr.op], (self._filter(expr.left), self._filter(expr.right))
                )
            raise SemanticError(f"Invalid operator in filter: {expr.op.value}")
        if isinstance(expr, UnaryOp):
            if expr.op is UnaryOperator.NOT:
                return Logical(LogicalOp.NOT, (self._filter(expr.operand),))
            raise SemanticError("Invalid unary operator in filter")
        raise SemanticError("Invalid filter expression")

    def _expression(self, expr: Expression) -> ExpressionIntent:
        match expr:
            case Column(name=name):
                return ColumnRef(name)
            case QualifiedColumn(table=table, column=column):
                return QualifiedColumnRef(table, column)
            case Literal(value=value):
                return Constant(value)
            case BinaryOp(op=op, left=left, right=right):
                left_intent = self._expression(left)
                right_intent = self._expression(right)
                if op not in _ARITHMETIC:
                    raise SemanticError("Non-arithmetic operator in expression")
                return Arithmetic(_ARITHMETIC[op], left_intent, right_intent)
            case FunctionCall(name=name, args=args):
                return FunctionCallIntent(name, tuple(self._expression(a) for a in args))
            case Star():
                return ColumnRef("*")
            case _:
                raise SemanticError(f"Unsupported expression type: {expr!r}")

    def _order_by(self, order_by: OrderByClause) -> OrderIntent:
        return OrderIntent(self._expression(order_by.expr), order_by.ascending)

    @staticmethod
    def _table_name(table_ref: TableReference) -> str:
        if isinstance(table_ref, (TableRef, AliasedTable)):
            return table_ref.table
        raise SemanticError(f"Invalid table reference: {table_ref!r}")

    @staticmethod
    def _constant(expr: Expression) -> Value:
        if isinstance(expr, Literal):
            return expr.value
        raise SemanticError("Expected constant value")