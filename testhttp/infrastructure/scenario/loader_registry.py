# infrastructure/scenario/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Union

from testhttp.domain.scenario import Feature
from testhttp.infrastructure.scenario.base_loader import ScenarioLoadError
from testhttp.infrastructure.scenario.gherkin_loader import GherkinScenarioLoader
from testhttp.infrastructure.scenario.json_loader import JsonScenarioLoader
from testhttp.infrastructure.scenario.yaml_loader import YamlScenarioLoader

Loader = Union[GherkinScenarioLoader, JsonScenarioLoader, YamlScenarioLoader]


class ScenarioLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, Loader] = {
            ".feature": GherkinScenarioLoader(),
            ".txt": GherkinScenarioLoader(),
            ".yaml": YamlScenarioLoader(),
            ".yml": YamlScenarioLoader(),
            ".json": JsonScenarioLoader(),
        }

    def get_loader(self, path: Path) -> Loader:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise ScenarioLoadError(f"Unsupported scenario format: {ext}")
        return loader

    def load(self, path: Path) -> Feature:
        return self.get_loader(path).load_from_file(str(path))
