import pytest

from storefront.config import DEFAULTS, Settings, load_config, load_settings


def test_missing_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = load_settings(tmp_path / "absent.yaml")
    assert s == Settings()


def test_partial_file_is_merged_over_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    p = tmp_path / "store.yaml"
    p.write_text("display:\n  item_width: 30\norders:\n  id_length: 8\n", encoding="utf-8")

    s = load_settings(p)

    assert s.item_width == 30
    assert s.category_width == 20
    assert s.order_id_length == 8
    assert s.order_id_alphabet == Settings().order_id_alphabet
    assert load_config(p)["logging"]["level"] == "INFO"


def test_env_overrides_log_level(tmp_path, monkeypatch):
    p = tmp_path / "store.yaml"
    p.write_text("logging:\n  level: info\n", encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_settings(p).log_level == "DEBUG"


def test_empty_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    p = tmp_path / "store.yaml"
    p.write_text("", encoding="utf-8")
    assert load_settings(p) == Settings()


@pytest.mark.parametrize("body, match", [
    ("- just\n- a list\n", "mapping"),
    ("orders:\n  id_length: 0\n", "id_length"),
])
def test_invalid_files_are_rejected(tmp_path, body, match):
    p = tmp_path / "store.yaml"
    p.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError, match=match):
        load_settings(p)


def test_settings_defaults_follow_default_mapping():
    s = Settings()
    assert s.category_width == DEFAULTS["display"]["category_width"]
    assert s.item_width == DEFAULTS["display"]["item_width"]
    assert s.order_id_length == DEFAULTS["orders"]["id_length"]
    assert s.order_id_alphabet == DEFAULTS["orders"]["id_alphabet"]
    assert s.log_level == DEFAULTS["logging"]["level"]
