"""Tests for override configuration parsing and loading."""

import dataclasses
import json
import logging

import pytest

from prompt_composer.config import ConfigError, PromptConfig, coerce_config, load_config
from prompt_composer.overrides import PromptMapping

VALID_ENTRY = {
    "baseUrls": ["https://api.example.com"],
    "modelNames": ["gpt-4"],
    "template": "T1",
}


class TestPromptConfig:
    def test_defaults(self):
        assert PromptConfig().system_prompt_mappings == ()

    def test_frozen_immutability(self):
        c = PromptConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.system_prompt_mappings = ()  # type: ignore[misc]


class TestFromDict:
    def test_camel_case_key(self):
        c = PromptConfig.from_dict({"systemPromptMappings": [VALID_ENTRY]})
        assert c.system_prompt_mappings == (
            PromptMapping(base_urls=["https://api.example.com"], model_names=["gpt-4"], template="T1"),
        )

    def test_snake_case_key_and_fields(self):
        c = PromptConfig.from_dict({
            "system_prompt_mappings": [
                {"base_urls": ["https://a.com"], "model_names": ["m"], "template": "T"},
            ]
        })
        assert len(c.system_prompt_mappings) == 1
        assert c.system_prompt_mappings[0].template == "T"

    def test_preserves_order(self):
        second = dict(VALID_ENTRY, template="T2")
        c = PromptConfig.from_dict({"systemPromptMappings": [VALID_ENTRY, second]})
        assert [m.template for m in c.system_prompt_mappings] == ["T1", "T2"]

    def test_missing_key_is_empty(self):
        assert PromptConfig.from_dict({"theme": "dark"}) == PromptConfig()

    @pytest.mark.parametrize("data", [None, [], "text", 42])
    def test_non_mapping_is_empty(self, data):
        assert PromptConfig.from_dict(data) == PromptConfig()

    def test_non_list_mappings_is_empty(self, caplog):
        with caplog.at_level(logging.WARNING, logger="prompt_composer"):
            c = PromptConfig.from_dict({"systemPromptMappings": {"a": 1}})
        assert c == PromptConfig()
        assert "expected a list" in caplog.text

    @pytest.mark.parametrize(
        "entry",
        [
            "not a dict",
            {"modelNames": ["gpt-4"], "template": "T"},
            {"baseUrls": ["https://a.com"], "template": "T"},
            {"baseUrls": ["https://a.com"], "modelNames": ["gpt-4"]},
            {"baseUrls": "https://a.com", "modelNames": ["gpt-4"], "template": "T"},
            {"baseUrls": ["https://a.com", 3], "modelNames": ["gpt-4"], "template": "T"},
            {"baseUrls": ["https://a.com"], "modelNames": ["gpt-4"], "template": 7},
        ],
    )
    def test_malformed_entries_skipped(self, entry, caplog):
        with caplog.at_level(logging.WARNING, logger="prompt_composer"):
            c = PromptConfig.from_dict({"systemPromptMappings": [entry, VALID_ENTRY]})
        assert [m.template for m in c.system_prompt_mappings] == ["T1"]
        assert "index 0" in caplog.text

    def test_accepts_prompt_mapping_instances(self):
        m = PromptMapping(["https://a.com"], ["m"], "T")
        c = PromptConfig.from_dict({"systemPromptMappings": [m]})
        assert c.system_prompt_mappings == (m,)


class TestCoerceConfig:
    def test_none(self):
        assert coerce_config(None) == PromptConfig()

    def test_passes_through_instance(self):
        c = PromptConfig()
        assert coerce_config(c) is c

    def test_instance_with_settings_entries_is_parsed(self):
        c = coerce_config(PromptConfig(system_prompt_mappings=[VALID_ENTRY]))
        assert c.system_prompt_mappings == (
            PromptMapping(base_urls=["https://api.example.com"], model_names=["gpt-4"], template="T1"),
        )

    def test_instance_with_junk_entries_drops_them(self, caplog):
        with caplog.at_level(logging.WARNING, logger="prompt_composer"):
            c = coerce_config(PromptConfig(system_prompt_mappings=("junk", VALID_ENTRY)))
        assert [m.template for m in c.system_prompt_mappings] == ["T1"]
        assert "index 0" in caplog.text

    def test_dict(self):
        c = coerce_config({"systemPromptMappings": [VALID_ENTRY]})
        assert len(c.system_prompt_mappings) == 1


class TestLoadConfig:
    def test_loads_settings_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"systemPromptMappings": [VALID_ENTRY], "theme": "dark"}))
        c = load_config(path)
        assert c.system_prompt_mappings[0].template == "T1"

    def test_accepts_string_path(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{}")
        assert load_config(str(path)) == PromptConfig()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.path == str(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)

    def test_json_array_is_empty_config(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]")
        assert load_config(path) == PromptConfig()
