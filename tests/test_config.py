import json
import logging

import pytest

from wordpaste.core.config import DEFAULT_CONFIG, NormalizerConfig


class TestNormalizerConfig:
    def test_defaults(self):
        config = NormalizerConfig()

        assert config.legal_list_support is False
        assert config.legal_list_class == "legal-list"
        assert config.document_parser == "lxml"
        assert config.fragment_parser == "html.parser"

    def test_overrides(self):
        config = NormalizerConfig(legal_list_support=True, legal_list_class="outline")

        assert config.legal_list_support is True
        assert config.legal_list_class == "outline"
        # Class level defaults stay intact
        assert DEFAULT_CONFIG.legal_list_support is False

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            NormalizerConfig(legal_lists=True)

    def test_as_dict(self):
        assert NormalizerConfig(document_parser="html.parser").as_dict() == {
            "legal_list_support": False,
            "legal_list_class": "legal-list",
            "document_parser": "html.parser",
            "fragment_parser": "html.parser",
        }


class TestConfigFile:
    def test_from_file(self, tmp_path):
        path = tmp_path / "normalizer.json"
        path.write_text(json.dumps({"legal_list_support": True}), encoding="utf-8")

        config = NormalizerConfig.from_file(path)
        assert config.legal_list_support is True
        assert config.legal_list_class == "legal-list"

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="wordpaste.core.config"):
            config = NormalizerConfig.from_file(tmp_path / "absent.json")

        assert config.as_dict() == NormalizerConfig().as_dict()
        assert "not found" in caplog.text

    def test_invalid_json(self, tmp_path, caplog):
        path = tmp_path / "broken.json"
        path.write_text("{legal_list_support: yes", encoding="utf-8")

        with caplog.at_level(logging.ERROR, logger="wordpaste.core.config"):
            config = NormalizerConfig.from_file(path)

        assert config.legal_list_support is False
        assert "Failed to read normalizer config" in caplog.text

    def test_not_an_object(self, tmp_path, caplog):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with caplog.at_level(logging.ERROR, logger="wordpaste.core.config"):
            config = NormalizerConfig.from_file(str(path))

        assert config.as_dict() == NormalizerConfig().as_dict()
        assert "must hold a JSON object" in caplog.text

    def test_unknown_keys_ignored(self, tmp_path, caplog):
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({"legal_list_class": "outline", "theme": "dark"}), encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="wordpaste.core.config"):
            config = NormalizerConfig.from_file(path)

        assert config.legal_list_class == "outline"
        assert "theme" in caplog.text
