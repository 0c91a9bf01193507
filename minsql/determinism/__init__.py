"""Hybrid logical clock, deterministic scheduling and write-ahead log replay."""