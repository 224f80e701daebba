"""Tests for shared common modules — config and logging."""

import io
import logging
import sys

import pytest

from src.common import config as config_module
from src.common.config import LLMSettings, Settings, get_api_key
from src.common.logging import setup_logging


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.llm.gemini_model == "gemini-1.5-flash"
        assert settings.default_provider == "gemini"
        assert settings.default_variant == "academic"

    def test_load_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config_module, "CONFIG_DIR", tmp_path)
        assert Settings.load() == Settings()

    def test_load_from_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "settings.yaml").write_text(
            "llm:\n  gemini_model: gemini-2.0-flash\n  max_tokens: 2048\ndefault_variant: social\n",
            encoding="utf-8",
        )
        monkeypatch.setattr(config_module, "CONFIG_DIR", tmp_path)

        settings = Settings.load()
        assert settings.llm.gemini_model == "gemini-2.0-flash"
        assert settings.llm.max_tokens == 2048
        assert settings.llm.openai_model == LLMSettings().openai_model
        assert settings.default_variant == "social"

    def test_load_empty_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "settings.yaml").write_text("", encoding="utf-8")
        monkeypatch.setattr(config_module, "CONFIG_DIR", tmp_path)
        assert Settings.load() == Settings()


class TestApiKey:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", " secret ")
        assert get_api_key("gemini") == "secret"

    def test_unset_is_empty(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        assert get_api_key("openai") == ""

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            get_api_key("cohere")


class TestLogging:
    def test_setup_logging_is_idempotent(self):
        logger = setup_logging(module_name="test_common.idempotent")
        again = setup_logging(module_name="test_common.idempotent")

        assert logger is again
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_custom_level(self):
        logger = setup_logging(level=logging.DEBUG, module_name="test_common.debug")
        assert logger.level == logging.DEBUG

    def test_default_stream_is_stderr(self):
        logger = setup_logging(module_name="test_common.stderr")
        assert logger.handlers[0].stream is sys.stderr

    def test_custom_stream(self):
        buffer = io.StringIO()
        logger = setup_logging(module_name="test_common.buffer", stream=buffer)
        logger.info("hello")
        assert "[INFO] test_common.buffer: hello" in buffer.getvalue()
