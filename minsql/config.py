"""Node configuration read from command-line arguments."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1
_U16_MAX = 2**16 - 1


class ConfigError(ValueError):
    """Raised for malformed command-line options."""


def _parse_unsigned(text: str, limit: int, what: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ConfigError(f"Invalid {what}: {text!r}")
    number = int(text)
    if number > limit:
        raise ConfigError(f"Invalid {what}: {text!r}")
    return number


@dataclass
class Config:
    """Settings for one database node."""

    node_id: int = 1
    data_dir: str = "./data"
    port: int = 5433
    peers: List[str] = field(default_factory=list)
    buffer_pool_size: int = 1024
    wal_buffer_size: int = 65536
    deterministic: bool = False
    num_shards: int = 16

    @classmethod
    def from_args(cls, argv: Optional[Sequence[str]] = None) -> "Config":
        """Build a config from arguments, excluding the program name.

        With no arguments given, ``sys.argv[1:]`` is read. Unknown arguments
        are ignored.
        """
        args = list(sys.argv[1:] if argv is None else argv)
        config = cls()
        options = {"--node-id", "--data-dir", "--port", "--peers"}
        remaining = iter(args)
        for arg in remaining:
            if arg not in options:
                continue
            try:
                value = next(remaining)
            except StopIteration:
                raise ConfigError(f"Missing value for {arg}") from None
            if arg == "--node-id":
                config.node_id = _parse_unsigned(value, _U32_MAX, "node-id")
            elif arg == "--data-dir":
                config.data_dir = value
            elif arg == "--port":
                config.port = _parse_unsigned(value, _U16_MAX, "port")
            else:
                config.peers = value.split(",")
        return config

    def data_path(self) -> Path:
        """The data directory as a path."""
        return Path(self.data_dir)