"""Evaluation of expression and filter intents against rows."""

from __future__ import annotations

import math
import operator
import sys
from typing import Callable, Dict, Sequence

from minsql.execution.rows import Tuple, Value
from minsql.language.intent import (
    AlwaysFilter,
    Arithmetic,
    ArithmeticOp,
    ColumnRef,
    Comparison,
    ComparisonOp,
    Constant,
    ExpressionIntent,
    FilterIntent,
    FunctionCallIntent,
    Logical,
    LogicalOp,
    NeverFilter,
    QualifiedColumnRef,
)


class EvaluationError(ValueError):
    """Raised when an expression cannot be evaluated."""


_ORDERING: Dict[ComparisonOp, Callable[[object, object], bool]] = {
    ComparisonOp.EQUAL: operator.eq,
    ComparisonOp.NOT_EQUAL: operator.ne,
    ComparisonOp.LESS_THAN: operator.lt,
    ComparisonOp.LESS_THAN_OR_EQUAL: operator.le,
    ComparisonOp.GREATER_THAN: operator.gt,
    ComparisonOp.GREATER_THAN_OR_EQUAL: operator.ge,
}

_EPSILON = sys.float_info.epsilon


def _kind(value: Value) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    return "str"


def _int_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _float_divide(left: float, right: float) -> float:
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


class ExpressionEvaluator:
    """Computes values of expressions and truth of filters for a row."""

    def evaluate(self, expr: ExpressionIntent, row: Tuple) -> Value:
        """Return the value of ``expr`` for ``row``."""
        match expr:
            case ColumnRef(name=name):
                return row.get(name)
            case QualifiedColumnRef(column=column):
                return row.get(column)
            case Constant(value=value):
                return value
            case Arithmetic(op=op, left=left, right=right):
                return self._arithmetic(op, self.evaluate(left, row), self.evaluate(right, row))
            case FunctionCallIntent(name=name, args=args):
                return self._function(name, args, row)
            case _:
                raise EvaluationError(f"Unsupported expression: {expr!r}")

    def evaluate_filter(self, filter_intent: FilterIntent, row: Tuple) -> bool:
        """Return whether ``row`` satisfies ``filter_intent``."""
        match filter_intent:
            case AlwaysFilter():
                return True
            case NeverFilter():
                return False
            case Comparison(op=op, left=left, right=right):
                return self._comparison(op, self.evaluate(left, row), self.evaluate(right, row))
            case Logical(op=LogicalOp.AND, operands=operands):
                return all(self.evaluate_filter(o, row) for o in operands)
            case Logical(op=LogicalOp.OR, operands=operands):
                return any(self.evaluate_filter(o, row) for o in operands)
            case Logical(op=LogicalOp.NOT, operands=operands):
                if len(operands) != 1:
                    raise EvaluationError("NOT expects exactly one operand")
                return not self.evaluate_filter(operands[0], row)
            case _:
                raise EvaluationError(f"Unsupported filter: {filter_intent!r}")

    @staticmethod
    def _arithmetic(op: ArithmeticOp, left: Value, right: Value) -> Value:
        kinds = (_kind(left), _kind(right))
        if kinds == ("int", "int"):
            if op is ArithmeticOp.DIVIDE:
                if right == 0:
                    raise EvaluationError("Division by zero")
                return _int_divide(left, right)
        elif kinds == ("float", "float"):
            if op is ArithmeticOp.DIVIDE:
                return _float_divide(left, right)
        else:
            raise EvaluationError("Type mismatch in arithmetic operation")
        if op is ArithmeticOp.ADD:
            return left + right
        if op is ArithmeticOp.SUBTRACT:
            return left - right
        return left * right

    @staticmethod
    def _comparison(op: ComparisonOp, left: Value, right: Value) -> bool:
        kinds = (_kind(left), _kind(right))
        if kinds == ("float", "float"):
            if op is ComparisonOp.EQUAL:
                return abs(left - right) < _EPSILON
            if op is ComparisonOp.NOT_EQUAL:
                return abs(left - right) >= _EPSILON
            return _ORDERING[op](left, right)
        if kinds in (("int", "int"), ("str", "str")):
            return _ORDERING[op](left, right)
        raise EvaluationError("Type mismatch in comparison")

    def _function(self, name: str, args: Sequence[ExpressionIntent], row: Tuple) -> Value:
        lowered = name.lower()
        if lowered == "count":
            return 1
        if lowered == "sum":
            return self.evaluate(args[0], row) if args else 0
        if lowered == "avg":
            return self.evaluate(args[0], row) if args else 0.0
        raise EvaluationError(f"Unknown function: {name}")