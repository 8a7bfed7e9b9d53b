"""
Unit tests for package logging: quiet as a library, configured by the CLI.
"""

import logging

import pytest

from story_gateway import gateway
from story_gateway.api.exceptions import GeminiAPIError
from story_gateway.logging_utils import LOG_FILENAME, get_logger, log_generation_complete, setup_logging

from conftest import FakeResponse


class TestLibraryLogging:
    """Gateway calls never configure logging on their own."""

    def test_package_logger_has_null_handler(self):
        assert any(isinstance(h, logging.NullHandler) for h in get_logger().handlers)

    def test_character_check_creates_no_files_and_stays_quiet(
        self, tmp_path, monkeypatch, no_fallback_key, capsys
    ):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("STORY_GATEWAY_LOG_DIR", raising=False)

        assert gateway.has_character("data:image/png;base64,QUJD") is True

        assert list(tmp_path.iterdir()) == []
        assert capsys.readouterr().err == ""
        assert all(isinstance(h, logging.NullHandler) for h in get_logger().handlers)

    def test_failed_call_logged_before_reraise(self, fallback_key, mock_post, caplog):
        mock_post.return_value = FakeResponse(status_code=500, text="internal")
        with caplog.at_level(logging.ERROR, logger="story_gateway"):
            with pytest.raises(GeminiAPIError):
                gateway.generate_scene_image("fox")
        assert "Generation failed: scene_image" in caplog.text


class TestSetupLogging:
    """Handler setup used by the command line."""

    def test_writes_log_file_in_given_dir(self, tmp_path):
        log_file = setup_logging(tmp_path / "logs")
        get_logger().info("hello from the cli")
        for handler in get_logger().handlers:
            handler.flush()

        assert log_file == tmp_path / "logs" / LOG_FILENAME
        assert "hello from the cli" in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path):
        setup_logging(tmp_path)
        setup_logging(tmp_path)
        handlers = [h for h in get_logger().handlers if not isinstance(h, logging.NullHandler)]
        assert len(handlers) == 2

    def test_generation_complete_levels(self, caplog):
        with caplog.at_level(logging.INFO, logger="story_gateway"):
            log_generation_complete("speech", True, "ok")
            log_generation_complete("speech", False, "boom")
        levels = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert (logging.INFO, "Generation completed: speech - ok") in levels
        assert (logging.ERROR, "Generation failed: speech - boom") in levels
