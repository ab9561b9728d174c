"""Condition sets controlling when a bar is shown."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List

# Conditions bound to a specific character; sharing them leaks account data.
SENSITIVE_CONDITION_IDS = frozenset({"c"})


class ConditionOperator(IntEnum):
    AND = 0
    OR = 1
    XOR = 2
    EQUALS = 3


@dataclass(slots=True)
class Condition:
    id: str = ""
    arg: Any = 0
    negate: bool = False
    operator: ConditionOperator = ConditionOperator.AND


@dataclass(slots=True)
class ConditionSet:
    name: str = ""
    conditions: List[Condition] = field(default_factory=list)

    def is_sensitive(self) -> bool:
        return any(c.id in SENSITIVE_CONDITION_IDS for c in self.conditions)
