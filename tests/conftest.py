"""
Shared fixtures: fake Gemini HTTP responses and API key control.
"""

import json
import os
import tempfile

# The CLI tests call setup_logging(); keep its log file out of the working tree.
os.environ.setdefault("STORY_GATEWAY_LOG_DIR", tempfile.mkdtemp(prefix="story_gateway_logs_"))

from unittest.mock import patch

import pytest

from story_gateway import config
from story_gateway.logging_utils import get_logger


class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload if payload is not None else {}
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self.text = text if text is not None else json.dumps(self._payload)

    def json(self):
        return self._payload


def candidate_response(parts, finish_reason="STOP"):
    """Gemini response body with a single candidate holding parts."""
    return {
        "candidates": [
            {"content": {"role": "model", "parts": parts}, "finishReason": finish_reason}
        ]
    }


def text_response(text):
    return candidate_response([{"text": text}])


def sent_payload(mock_post, call_index=-1):
    """Decode the JSON body of a recorded requests.post call."""
    call = mock_post.call_args_list[call_index]
    return json.loads(call.kwargs["data"])


@pytest.fixture
def fallback_key(monkeypatch):
    """Process-wide fallback key is configured."""
    monkeypatch.setattr(config, "ENV_API_KEY", "env-key")
    return "env-key"


@pytest.fixture
def no_fallback_key(monkeypatch):
    """No process-wide fallback key."""
    monkeypatch.setattr(config, "ENV_API_KEY", "")


@pytest.fixture
def mock_post():
    """Patch the HTTP call made by GeminiClient."""
    with patch("story_gateway.api.gemini_client.requests.post") as m:
        m.return_value = FakeResponse(candidate_response([]))
        yield m


@pytest.fixture(autouse=True)
def isolated_logger():
    """Restore the package logger's handlers and level after each test."""
    logger = get_logger()
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
