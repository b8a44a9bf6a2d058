"""
Tests for configuration loading.
"""

import json

import pytest

from timestamp_parse.modules.config import AppConfig, load_config


def _write(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_config_defaults():
    assert load_config(None) == AppConfig(default_zone="UTC", header="Date", timeout=10)


def test_load_config_from_file(tmp_path):
    path = _write(tmp_path, {"default_zone": "Europe/Paris", "header": "Last-Modified", "timeout": 3})

    config = load_config(str(path))

    assert config.default_zone == "Europe/Paris"
    assert config.header == "Last-Modified"
    assert config.timeout == 3


def test_load_config_partial_file(tmp_path):
    config = load_config(str(_write(tmp_path, {"default_zone": "Asia/Tokyo"})))

    assert config == AppConfig(default_zone="Asia/Tokyo")


def test_load_config_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        load_config(str(tmp_path / "missing.json"))


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit):
        load_config(str(path))


@pytest.mark.parametrize("timeout", [0, -1, "10", True])
def test_load_config_invalid_timeout(tmp_path, timeout):
    with pytest.raises(SystemExit):
        load_config(str(_write(tmp_path, {"timeout": timeout})))


@pytest.mark.parametrize("data", [{"default_zone": 5}, {"default_zone": ""}, {"header": []}, {"header": None}])
def test_load_config_invalid_strings(tmp_path, data):
    with pytest.raises(SystemExit):
        load_config(str(_write(tmp_path, data)))


@pytest.mark.parametrize("data", [[], "UTC", 10])
def test_load_config_requires_object(tmp_path, data):
    with pytest.raises(SystemExit):
        load_config(str(_write(tmp_path, data)))
