"""Columnar storage, vectorized batch execution, query caching and materialized views."""