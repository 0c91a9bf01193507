"""Rows, expression and filter evaluation, query sandboxing and operators."""