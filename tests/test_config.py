import json

import pytest

from fontatlas.config import DEFAULT_CHARSET, AtlasConfig
from fontatlas.errors import AtlasConfigError


def test_default_charset():
    assert DEFAULT_CHARSET.startswith("0123456789abc")
    assert DEFAULT_CHARSET.endswith("üäöß ")
    assert "№" in DEFAULT_CHARSET
    assert len(set(DEFAULT_CHARSET)) == len(DEFAULT_CHARSET)


def test_defaults():
    config = AtlasConfig()
    assert config.charset == DEFAULT_CHARSET
    assert config.canvas_width == 2000
    assert (config.pad_x, config.pad_y) == (12, 20)
    assert (config.left_inset, config.top_inset) == (10, 20)
    assert config.vertical_slack == 1000
    assert config.validate() is config


@pytest.mark.parametrize("kwargs", [
    {"charset": ""},
    {"charset": "abca"},
    {"canvas_width": 0},
    {"pad_x": -1},
    {"vertical_slack": -5},
    {"canvas_width": "wide"},
])
def test_validate_rejects(kwargs):
    with pytest.raises(AtlasConfigError):
        AtlasConfig(**kwargs).validate()


def test_load_missing_file_gives_defaults(tmp_path):
    assert AtlasConfig.load(tmp_path / "nope.json") == AtlasConfig()


def test_save_and_load(tmp_path):
    path = tmp_path / "atlas.json"
    AtlasConfig(charset="abc №", canvas_width=512, pad_x=2).save(path)
    loaded = AtlasConfig.load(path)
    assert loaded.charset == "abc №"
    assert loaded.canvas_width == 512
    assert loaded.pad_x == 2
    assert loaded.pad_y == 20


def test_load_partial_file(tmp_path):
    path = tmp_path / "atlas.json"
    path.write_text(json.dumps({"pad_y": 4}), encoding="utf-8")
    config = AtlasConfig.load(path)
    assert config.pad_y == 4
    assert config.charset == DEFAULT_CHARSET


def test_load_malformed_json(tmp_path):
    path = tmp_path / "atlas.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(AtlasConfigError):
        AtlasConfig.load(path)


def test_load_not_an_object(tmp_path):
    path = tmp_path / "atlas.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(AtlasConfigError):
        AtlasConfig.load(path)


def test_unknown_option():
    with pytest.raises(AtlasConfigError):
        AtlasConfig.from_dict({"padding": 3})
