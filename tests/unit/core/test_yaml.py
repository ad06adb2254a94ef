"""
Unit tests for core.yaml module.

Tests:
- load_yaml() with valid, empty and missing files
- Non-mapping documents rejected
- Invalid YAML syntax propagated
"""

from pathlib import Path

import pytest
import yaml

from divvi_referral.core.exceptions import ConfigurationError
from divvi_referral.core.yaml import load_yaml


class TestLoadYaml:
    def test_mapping(self, tmp_path: Path):
        path = tmp_path / "reporter.yaml"
        path.write_text("referral_url: https://example.com/r\nmax_body_size: 1024\n")
        assert load_yaml(path) == {"referral_url": "https://example.com/r", "max_body_size": 1024}

    def test_accepts_str_path(self, tmp_path: Path):
        path = tmp_path / "reporter.yaml"
        path.write_text("a: 1\n")
        assert load_yaml(str(path)) == {"a": 1}

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}

    def test_comments_only(self, tmp_path: Path):
        path = tmp_path / "comments.yaml"
        path.write_text("# nothing configured\n")
        assert load_yaml(path) == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_yaml(tmp_path / "missing.yaml")

    def test_list_document(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_yaml(path)

    def test_invalid_syntax(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("key: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_yaml(path)

    def test_python_tags_rejected(self, tmp_path: Path):
        path = tmp_path / "unsafe.yaml"
        path.write_text("value: !!python/object/apply:os.getcwd []\n")
        with pytest.raises(yaml.YAMLError):
            load_yaml(path)
