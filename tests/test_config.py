from __future__ import annotations

import pytest

from soupwalk.config import FetchConfig, SoupConfig, load_config, save_config


def test_load_config_reads_fetch_settings(tmp_path):
    path = tmp_path / "soupwalk.yaml"
    path.write_text(
        """
parser: html.parser
fetch:
  timeout: 5
  user_agent: custom/2.0
  headers:
    Accept-Language: en
  cookies:
    session: abc
        """.strip()
    )

    config = load_config(path)

    assert config.parser == "html.parser"
    assert config.fetch == FetchConfig(
        timeout=5.0,
        user_agent="custom/2.0",
        headers={"Accept-Language": "en"},
        cookies={"session": "abc"},
    )


def test_empty_config_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config(path) == SoupConfig()


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_non_mapping_config_is_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- one\n- two\n")

    with pytest.raises(ValueError):
        load_config(path)


def test_save_then_load_preserves_values(tmp_path):
    config = SoupConfig(fetch=FetchConfig(timeout=7).with_cookie("sid", "1"))
    path = tmp_path / "nested" / "soupwalk.yaml"

    save_config(config, path)

    assert load_config(path) == config


def test_unknown_top_level_keys_are_rejected(tmp_path):
    path = tmp_path / "typo.yaml"
    path.write_text("parsr: html5lib\n")

    with pytest.raises(ValueError, match="unknown soupwalk config keys: parsr"):
        load_config(path)
