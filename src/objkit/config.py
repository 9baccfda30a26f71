from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjkitConfig:
    sort_keys: bool = False  # default keeps mapping insertion order
    ensure_ascii: bool = False
    log_level: str = "WARNING"  # "DEBUG", "INFO", "WARNING", "ERROR"
