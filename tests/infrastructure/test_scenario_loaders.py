import json
from pathlib import Path

import pytest

from testhttp.infrastructure.scenario import (
    GherkinScenarioLoader,
    JsonScenarioLoader,
    ScenarioLoadError,
    ScenarioLoaderRegistry,
    YamlScenarioLoader,
)

FEATURE_TEXT = """\
@api
Feature: Users API
  Free text describing the feature.

  Background:
    Given I have a GET request "/users"

  # listing
  Scenario: list users
    When I make the request
    Then the response code equals 200

  Example: fetch one
    When I make a GET request to "/users/1"
    And the response contains a valid JSON
"""


class TestGherkinScenarioLoader:
    def test_load_from_text(self):
        feature = GherkinScenarioLoader().load_from_text(FEATURE_TEXT)

        assert feature.name == "Users API"
        assert [s.name for s in feature.scenarios] == ["list users", "fetch one"]
        assert feature.scenarios[0].steps == [
            'Given I have a GET request "/users"',
            "When I make the request",
            "Then the response code equals 200",
        ]
        assert feature.scenarios[1].steps[0] == 'Given I have a GET request "/users"'

    def test_load_from_file_uses_stem_without_feature_line(self, tmp_path):
        path = tmp_path / "smoke.feature"
        path.write_text("Scenario: ping\n  * I make a GET request to \"/\"\n", encoding="utf-8")

        feature = GherkinScenarioLoader().load_from_file(str(path))

        assert feature.name == "smoke"
        assert feature.scenarios[0].steps == ['* I make a GET request to "/"']

    def test_missing_file(self, tmp_path):
        with pytest.raises(ScenarioLoadError, match="not found"):
            GherkinScenarioLoader().load_from_file(str(tmp_path / "nope.feature"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.feature"
        path.write_text("  \n", encoding="utf-8")

        with pytest.raises(ScenarioLoadError, match="empty"):
            GherkinScenarioLoader().load_from_file(str(path))

    @pytest.mark.parametrize(
        "text, message",
        [
            ('Scenario: s\n  Given I set request body to "x"\n  """\n  body\n  """\n', "doc strings"),
            ("Scenario: s\n  Given x\n  | a | b |\n", "data tables"),
            ("Scenario Outline: s\n  Given x\n", "Scenario Outline"),
            ("Feature: f\n  Rule: r\n", "Rule"),
            ("Scenario: s\n  Given x\nBackground:\n  Given y\n", "Background must come before"),
            ("Scenario: s\n  Given x\n  something odd\n", "unrecognised line"),
        ],
    )
    def test_unsupported_constructs(self, text, message):
        with pytest.raises(ScenarioLoadError, match=message):
            GherkinScenarioLoader().load_from_text(text)


class TestStructuredLoaders:
    DATA = {
        "feature": "Users API",
        "scenarios": [
            {"name": "list users", "steps": ['I make a GET request to "/users"', "the response code equals 200"]},
            {"steps": ["I make the request"]},
        ],
    }

    def test_yaml_loader(self, tmp_path):
        path = tmp_path / "users.yaml"
        path.write_text(
            "feature: Users API\n"
            "scenarios:\n"
            "  - name: list users\n"
            "    steps:\n"
            "      - I make a GET request to \"/users\"\n"
            "      - the response code equals 200\n",
            encoding="utf-8",
        )

        feature = YamlScenarioLoader().load_from_file(str(path))

        assert feature.name == "Users API"
        assert feature.scenarios[0].steps[1] == "the response code equals 200"

    def test_json_loader_defaults_names(self, tmp_path):
        data = {"scenarios": [{"steps": ["I make the request"]}]}
        path = tmp_path / "smoke.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        feature = JsonScenarioLoader().load_from_file(str(path))

        assert feature.name == "smoke"
        assert feature.scenarios[0].name == "scenario 1"

    def test_load_from_dict(self):
        feature = JsonScenarioLoader().load_from_dict(self.DATA)

        assert len(feature.scenarios) == 2
        assert feature.scenarios[1].name == "scenario 2"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ScenarioLoadError, match="Invalid JSON"):
            JsonScenarioLoader().load_from_file(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("scenarios: [unclosed\n", encoding="utf-8")

        with pytest.raises(ScenarioLoadError, match="Invalid YAML"):
            YamlScenarioLoader().load_from_file(str(path))

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ScenarioLoadError, match="empty"):
            YamlScenarioLoader().load_from_file(str(path))

    @pytest.mark.parametrize(
        "data, message",
        [
            ({"scenarios": "x"}, "must be a list"),
            ({"scenarios": ["x"]}, "must be a mapping"),
            ({"scenarios": [{"steps": [1, 2]}]}, "list of strings"),
        ],
    )
    def test_invalid_structure(self, data, message):
        with pytest.raises(ScenarioLoadError, match=message):
            YamlScenarioLoader().load_from_dict(data)


class TestScenarioLoaderRegistry:
    @pytest.mark.parametrize(
        "name, loader_type",
        [
            ("a.feature", GherkinScenarioLoader),
            ("a.txt", GherkinScenarioLoader),
            ("a.yaml", YamlScenarioLoader),
            ("a.YML", YamlScenarioLoader),
            ("a.json", JsonScenarioLoader),
        ],
    )
    def test_get_loader(self, name, loader_type):
        assert isinstance(ScenarioLoaderRegistry().get_loader(Path(name)), loader_type)

    def test_unsupported_extension(self):
        with pytest.raises(ScenarioLoadError, match="Unsupported"):
            ScenarioLoaderRegistry().get_loader(Path("a.toml"))

    def test_load(self, tmp_path):
        path = tmp_path / "ping.feature"
        path.write_text("Feature: Ping\n  Scenario: up\n    When I make the request\n", encoding="utf-8")

        feature = ScenarioLoaderRegistry().load(path)

        assert feature.name == "Ping"
        assert feature.scenarios[0].steps == ["When I make the request"]
