from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjectsTasksConfig:
    json_indent: int | None = None  # None renders compact JSON
    json_sort_keys: bool = False
    log_level: str = "WARNING"
