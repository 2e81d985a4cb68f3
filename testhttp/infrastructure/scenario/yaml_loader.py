# infrastructure/scenario/yaml_loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from testhttp.infrastructure.scenario.base_loader import ScenarioLoaderBase, ScenarioLoadError


class YamlScenarioLoader(ScenarioLoaderBase):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ScenarioLoadError(f"Invalid YAML in {path}: {e}") from e
