# domain/scenario.py
"""
Scenario file model
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Scenario:
    name: str
    steps: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Feature:
    """
    A loaded scenario file: a name plus the scenarios it declares, with any
    background steps already folded into each scenario.
    """
    name: str
    scenarios: List[Scenario] = field(default_factory=list)
