# infrastructure/scenario/__init__.py
from testhttp.infrastructure.scenario.base_loader import ScenarioLoadError, ScenarioLoaderBase
from testhttp.infrastructure.scenario.gherkin_loader import GherkinScenarioLoader
from testhttp.infrastructure.scenario.json_loader import JsonScenarioLoader
from testhttp.infrastructure.scenario.loader_registry import ScenarioLoaderRegistry
from testhttp.infrastructure.scenario.yaml_loader import YamlScenarioLoader

__all__ = [
    "ScenarioLoadError",
    "ScenarioLoaderBase",
    "ScenarioLoaderRegistry",
    "GherkinScenarioLoader",
    "YamlScenarioLoader",
    "JsonScenarioLoader",
]
