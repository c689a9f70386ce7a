from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssbuildConfig:
    json_indent: int | None = None
    sort_keys: bool = False
    log_level: str = "WARNING"
