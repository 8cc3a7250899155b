"""Tests for LanguageTableConfig."""

import json
import tempfile
from pathlib import Path

import pytest

from isolang.config import LanguageTableConfig


class TestLanguageTableConfig:
    """Tests for feature configuration."""

    def test_defaults(self):
        """Test that only English names are enabled by default."""
        config = LanguageTableConfig()
        assert config.english_names is True
        assert config.lowercase_names is False
        assert config.local_names is False
        assert config.list_languages is False

    def test_lowercase_requires_english_names(self):
        """Test that lowercase_names without english_names is rejected."""
        with pytest.raises(ValueError, match="lowercase_names requires english_names"):
            LanguageTableConfig(english_names=False, lowercase_names=True)

    def test_to_dict(self):
        config = LanguageTableConfig(local_names=True)
        assert config.to_dict() == {
            "english_names": True,
            "lowercase_names": False,
            "local_names": True,
            "list_languages": False,
        }

    def test_from_dict(self):
        config = LanguageTableConfig.from_dict({"lowercase_names": True})
        assert isinstance(config, LanguageTableConfig)
        assert config.lowercase_names is True
        assert config.english_names is True

    def test_from_dict_unknown_key(self):
        with pytest.raises(TypeError):
            LanguageTableConfig.from_dict({"klingon_names": True})

    def test_from_dict_validates(self):
        with pytest.raises(ValueError):
            LanguageTableConfig.from_dict(
                {"english_names": False, "lowercase_names": True}
            )

    def test_to_json(self):
        """Test saving config to JSON file."""
        config = LanguageTableConfig(list_languages=True)

        with tempfile.TemporaryDirectory() as tmpdir:
            json_path = Path(tmpdir) / "nested" / "isolang.json"
            config.to_json(json_path)

            assert json_path.exists()
            with json_path.open() as f:
                loaded = json.load(f)
            assert loaded["list_languages"] is True

    def test_from_json(self):
        """Test loading config from JSON file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            json_path = Path(tmpdir) / "isolang.json"
            json_path.write_text(json.dumps({"local_names": True}))

            config = LanguageTableConfig.from_json(json_path)
            assert config.local_names is True

    def test_json_round_trip(self):
        config = LanguageTableConfig(lowercase_names=True, local_names=True)

        with tempfile.TemporaryDirectory() as tmpdir:
            json_path = Path(tmpdir) / "isolang.json"
            config.to_json(json_path)
            assert LanguageTableConfig.from_json(json_path) == config

    def test_from_json_missing_file(self):
        with pytest.raises(FileNotFoundError):
            LanguageTableConfig.from_json("/nonexistent/isolang.json")
