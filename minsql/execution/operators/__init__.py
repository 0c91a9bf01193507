"""Scan, join, aggregate and mutation operators."""