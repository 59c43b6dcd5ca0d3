from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssDeltaConfig:
    parser: str = "lark"  # "lark" or "tinycss2"
    encoding: str = "utf-8"
    log_level: str = "WARNING"
