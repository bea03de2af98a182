"""Tests for TreeOptions and settings loading."""

import json
import logging

import pytest

from filetreegen.config import TreeOptions, load_settings, parse_format
from filetreegen.exceptions import UnsupportedFormatError
from filetreegen.types import TreeFormat


def test_default_options():
    options = TreeOptions()
    assert options.max_depth == -1
    assert options.exclude_patterns == ()
    assert options.use_gitignore is True
    assert options.format is TreeFormat.TEXT


def test_options_normalize_values():
    options = TreeOptions(exclude_patterns=["*.log", "dist/"], format="Markdown")
    assert options.exclude_patterns == ("*.log", "dist/")
    assert options.format is TreeFormat.MARKDOWN


def test_options_are_immutable():
    options = TreeOptions()
    with pytest.raises(AttributeError):
        options.max_depth = 3  # type: ignore[misc]


@pytest.mark.parametrize("max_depth", [-2, 1.5, "3", True])
def test_invalid_max_depth(max_depth):
    with pytest.raises(ValueError):
        TreeOptions(max_depth=max_depth)


def test_single_string_pattern_rejected():
    with pytest.raises(ValueError):
        TreeOptions(exclude_patterns="*.log")  # type: ignore[arg-type]


def test_unknown_format_rejected():
    with pytest.raises(UnsupportedFormatError):
        TreeOptions(format="yaml")  # type: ignore[arg-type]


def test_needs_matcher():
    assert TreeOptions().needs_matcher
    assert TreeOptions(use_gitignore=False, exclude_patterns=["*.log"]).needs_matcher
    assert not TreeOptions(use_gitignore=False).needs_matcher


def test_replace_returns_new_options():
    options = TreeOptions()
    changed = options.replace(max_depth=2, format="json")
    assert changed.max_depth == 2
    assert changed.format is TreeFormat.JSON
    assert options.max_depth == -1


def test_parse_format():
    assert parse_format("TEXT") is TreeFormat.TEXT
    assert parse_format(TreeFormat.JSON) is TreeFormat.JSON
    with pytest.raises(UnsupportedFormatError):
        parse_format("html")


def test_from_mapping_reads_settings_keys():
    options = TreeOptions.from_mapping(
        {
            "maxDepth": 3,
            "excludePatterns": ["node_modules", "*.log"],
            "useGitignore": False,
            "defaultFormat": "json",
        }
    )
    assert options == TreeOptions(
        max_depth=3, exclude_patterns=("node_modules", "*.log"), use_gitignore=False, format=TreeFormat.JSON
    )


def test_from_mapping_empty_gives_defaults():
    assert TreeOptions.from_mapping({}) == TreeOptions()


@pytest.mark.parametrize(
    "settings",
    [
        {"maxDepth": "deep"},
        {"maxDepth": -5},
        {"maxDepth": True},
        {"excludePatterns": "*.log"},
        {"excludePatterns": [1, 2]},
        {"useGitignore": "yes"},
        {"defaultFormat": "yaml"},
    ],
)
def test_from_mapping_skips_invalid_values(settings, caplog):
    with caplog.at_level(logging.WARNING, logger="filetreegen.config"):
        options = TreeOptions.from_mapping(settings)
    assert options == TreeOptions()
    assert "Ignoring invalid" in caplog.text


def test_load_settings(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({"maxDepth": 2, "defaultFormat": "markdown"}))
    assert load_settings(settings_file) == {"maxDepth": 2, "defaultFormat": "markdown"}


def test_load_settings_missing_file(tmp_path):
    assert load_settings(tmp_path / "missing.json") == {}


def test_load_settings_malformed_file(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("{not json")
    assert load_settings(settings_file) == {}


def test_load_settings_non_object(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("[1, 2, 3]")
    assert load_settings(settings_file) == {}


def test_load_settings_default_location(tmp_path, monkeypatch):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({"useGitignore": False}))
    monkeypatch.setattr("filetreegen.config.DEFAULT_SETTINGS_PATH", settings_file)
    assert load_settings() == {"useGitignore": False}
