# infrastructure/scenario/gherkin_loader.py
"""
Reads the plain Gherkin subset the HTTP steps need: Feature, Background and
Scenario blocks made of single-line steps. Doc strings and data tables are
not supported.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from testhttp.domain.scenario import Feature, Scenario
from testhttp.infrastructure.scenario.base_loader import ScenarioLoadError

_STEP_KEYWORDS = ("Given ", "When ", "Then ", "And ", "But ", "* ")


class GherkinScenarioLoader:
    def load_from_file(self, path: str) -> Feature:
        p = Path(path)
        if not p.exists():
            raise ScenarioLoadError(f"Scenario file not found: {path}")
        text = p.read_text(encoding="utf-8")
        if not text.strip():
            raise ScenarioLoadError(f"Scenario file is empty: {path}")
        return self.load_from_text(text, default_name=p.stem)

    def load_from_text(self, text: str, default_name: str = "") -> Feature:
        feature_name: Optional[str] = None
        background: List[str] = []
        scenarios: List[Scenario] = []
        current: Optional[List[str]] = None  # steps of the open block
        current_name = ""
        in_background = False

        def close() -> None:
            if current is not None and not in_background:
                scenarios.append(Scenario(name=current_name, steps=background + current))

        for lineno, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#") or line.startswith("@"):
                continue

            if line.startswith('"""') or line.startswith("```") or line.startswith("|"):
                raise ScenarioLoadError(f"line {lineno}: doc strings and data tables are not supported")

            if line.startswith(("Scenario Outline:", "Scenario Template:", "Examples:", "Rule:")):
                raise ScenarioLoadError(f"line {lineno}: {line.split(':', 1)[0]} is not supported")

            if line.startswith("Feature:"):
                feature_name = line[len("Feature:"):].strip()
                continue

            if line.startswith("Background:"):
                if scenarios or (current is not None and not in_background):
                    raise ScenarioLoadError(f"line {lineno}: Background must come before any Scenario")
                in_background = True
                current = background
                continue

            if line.startswith(("Scenario:", "Example:")):
                close()
                in_background = False
                current_name = line.split(":", 1)[1].strip()
                current = []
                continue

            if line.startswith(_STEP_KEYWORDS):
                if current is None:
                    raise ScenarioLoadError(f"line {lineno}: step outside of a Scenario: {line}")
                current.append(line)
                continue

            if current is None:
                # free-form feature description
                continue
            raise ScenarioLoadError(f"line {lineno}: unrecognised line: {line}")

        close()
        return Feature(name=feature_name or default_name, scenarios=scenarios)
