# infrastructure/scenario/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

from testhttp.domain.scenario import Feature, Scenario


class ScenarioLoadError(Exception):
    pass


class ScenarioLoaderBase(ABC):
    """
    Loads structured scenario documents of the form::

        feature: Users API
        scenarios:
          - name: list users
            steps:
              - I make a GET request to "/users"
              - the response code equals 200
    """

    def load_from_file(self, path: str) -> Feature:
        p = Path(path)
        if not p.exists():
            raise ScenarioLoadError(f"Scenario file not found: {path}")

        data = self._load_file(p)

        if data is None:
            raise ScenarioLoadError(f"Scenario file is empty: {path}")
        if not isinstance(data, dict):
            raise ScenarioLoadError(f"Scenario file is invalid: {path}")

        return self.load_from_dict(data, default_name=p.stem)

    def load_from_dict(self, data: Dict[str, Any], default_name: str = "") -> Feature:
        scenarios_data = data.get("scenarios", [])
        if not isinstance(scenarios_data, list):
            raise ScenarioLoadError("'scenarios' must be a list")

        scenarios: List[Scenario] = []
        for i, item in enumerate(scenarios_data):
            if not isinstance(item, dict):
                raise ScenarioLoadError(f"scenario #{i + 1} must be a mapping")
            steps = item.get("steps", [])
            if not isinstance(steps, list) or not all(isinstance(s, str) for s in steps):
                raise ScenarioLoadError(f"scenario #{i + 1}: 'steps' must be a list of strings")
            scenarios.append(Scenario(name=str(item.get("name") or f"scenario {i + 1}"), steps=list(steps)))

        return Feature(name=str(data.get("feature") or default_name), scenarios=scenarios)

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
