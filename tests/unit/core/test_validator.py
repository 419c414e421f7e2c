from __future__ import annotations

"""
Unit tests for configuration validation.

Verifies type coercion, default injection, path normalization and strict mode.
"""

import os

import pytest

from permwalk.core.validator import validate_config


def test_defaults_are_filled() -> None:
    conf, warnings = validate_config({})

    assert warnings == []
    assert conf["permission"] == "755"
    assert conf["recursive"] is False
    assert conf["sort_entries"] is True
    assert os.path.isabs(conf["target_path"])


def test_string_booleans_are_coerced() -> None:
    conf, warnings = validate_config({"recursive": "yes", "dry_run": "0"})

    assert conf["recursive"] is True
    assert conf["dry_run"] is False
    assert warnings == []


def test_numeric_permission_is_accepted() -> None:
    conf, _ = validate_config({"permission": 750})
    assert conf["permission"] == "750"


def test_invalid_types_fall_back_with_warning() -> None:
    conf, warnings = validate_config({"recursive": [1], "permission": 3.5})

    assert conf["recursive"] is False
    assert conf["permission"] == "755"
    assert len(warnings) == 2


def test_unknown_keys_are_dropped() -> None:
    conf, _ = validate_config({"bogus": 1})
    assert "bogus" not in conf


def test_paths_are_normalized(tmp_path) -> None:
    conf, _ = validate_config({"target_path": f"  {tmp_path}/sub/..  "})
    assert conf["target_path"] == str(tmp_path)


def test_non_dict_returns_defaults() -> None:
    conf, warnings = validate_config(["not", "a", "dict"])
    assert conf["permission"] == "755"
    assert warnings and "Invalid config type" in warnings[0]


def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config({"dry_run": "maybe"}, strict=True)
    with pytest.raises(TypeError):
        validate_config("oops", strict=True)
