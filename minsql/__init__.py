"""Intent-driven query engine core with deterministic execution."""

__version__ = "0.1.0"