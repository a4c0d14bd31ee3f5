"""Tests for YAML configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tldsplit.config import DEFAULT_PSL_URL, DEFAULTS, Config, load_config
from tldsplit.exceptions import ConfigError


def write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "tldsplit.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestConfig:
    def test_defaults(self) -> None:
        config = load_config()
        assert config.get("source.location") == DEFAULT_PSL_URL
        assert config.get("source.frozen") is False
        assert config.get("source.timeout") == 30
        assert config.get("output.format") == "table"

    def test_missing_key_default(self) -> None:
        assert Config().get("source.nope", "x") == "x"
        assert Config().get("source.timeout.deeper") is None

    def test_configs_do_not_share_defaults(self) -> None:
        first = Config()
        first.data["source"]["timeout"] = 5
        assert DEFAULTS["source"]["timeout"] == 30
        assert Config().get("source.timeout") == 30

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        path = write(tmp_path, "source:\n  location: ./psl.dat\n  frozen: true\n")
        config = load_config(path)
        assert config.get("source.location") == "./psl.dat"
        assert config.get("source.frozen") is True
        assert config.get("source.timeout") == 30

    def test_empty_file(self, tmp_path: Path) -> None:
        assert load_config(write(tmp_path, "")).get("output.format") == "table"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(write(tmp_path, "source: [unclosed\n"))

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="mapping"):
            load_config(write(tmp_path, "- a\n- b\n"))

    @pytest.mark.parametrize(
        "content",
        [
            "source:\n  location: ''\n",
            "source:\n  frozen: maybe\n",
            "source:\n  timeout: 0\n",
            "output:\n  format: xml\n",
        ],
    )
    def test_invalid_values(self, tmp_path: Path, content: str) -> None:
        with pytest.raises(ConfigError):
            load_config(write(tmp_path, content))
