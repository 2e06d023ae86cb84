import json

import pytest

from klondike import common as C


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.setattr(C, "_CURRENT_SETTINGS", dict(C._DEFAULT_SETTINGS))
    monkeypatch.delenv("KLONDIKE_CARD_SIZE", raising=False)
    monkeypatch.delenv("KLONDIKE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("KLONDIKE_DRAW_COUNT", raising=False)


def test_load_settings_merges_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"card_size": "Large", "draw_count": 1}), encoding="utf-8")
    settings = C.load_settings(str(path))
    assert settings["card_size"] == "Large"
    assert settings["draw_count"] == 1
    assert settings["log_level"] == "WARNING"


@pytest.mark.parametrize("content", ["not json", "[1, 2]", ""])
def test_load_settings_ignores_bad_files(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(content, encoding="utf-8")
    assert C.load_settings(str(path)) == C._DEFAULT_SETTINGS


def test_load_settings_missing_file(tmp_path):
    assert C.load_settings(str(tmp_path / "nope.json")) == C._DEFAULT_SETTINGS


def test_unsupported_draw_count_falls_back(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"draw_count": 7}), encoding="utf-8")
    assert C.load_settings(str(path))["draw_count"] == 3


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "sub" / "settings.json"
    C.save_settings({"card_size": "Small", "ignored": True}, str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"card_size": "Small", "draw_count": 3, "log_level": "WARNING"}


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("KLONDIKE_CARD_SIZE", "large")
    monkeypatch.setenv("KLONDIKE_LOG_LEVEL", "debug")
    settings = C.apply_env_overrides()
    assert settings["card_size"] == "Large"
    assert settings["log_level"] == "DEBUG"
    assert C.current_layout().card_w == 150


def test_env_override_ignores_unknown_size(monkeypatch):
    monkeypatch.setenv("KLONDIKE_CARD_SIZE", "huge")
    assert C.apply_env_overrides()["card_size"] == "Medium"


@pytest.mark.parametrize(
    "name, dims",
    [("Small", (75, 105)), ("Medium", (100, 140)), ("Large", (150, 210)), ("bogus", (100, 140))],
)
def test_layout_for_card_size(name, dims):
    layout = C.Layout.for_card_size(name)
    assert (layout.card_w, layout.card_h) == dims


def test_layout_anchors():
    layout = C.Layout()
    assert layout.stock_anchor() == (10, 10)
    assert layout.discard_anchor() == (130, 10)
    assert [layout.foundation_anchor(i)[0] for i in range(4)] == [370, 490, 610, 730]
    assert layout.tableau_anchor(0) == (10, 170)
    assert layout.tableau_anchor(6) == (730, 170)
    assert layout.grab_offset(60, 80) == (10, 10)


def test_bounds_contains():
    b = C.Bounds(10, 10, 100, 140)
    assert b.contains(10, 10)
    assert b.contains(109, 149)
    assert not b.contains(110, 20)


@pytest.mark.parametrize("value, expected", [("1", 1), ("3", 3), ("2", 3), ("x", 3)])
def test_draw_count_env_override(monkeypatch, value, expected):
    monkeypatch.setenv("KLONDIKE_DRAW_COUNT", value)
    assert C.apply_env_overrides()["draw_count"] == expected
