from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JssConfig:
    class_prefix: str = "jss"
    namespace: int = 0  # middle component of generated class names
