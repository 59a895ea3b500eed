from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CascadeConfig:
    json_indent: int | None = None  # None = compact, like JSON.stringify
    json_sort_keys: bool = False
    log_level: str = "WARNING"
