"""
Unit tests for the command line entry point.
"""

import json
from unittest.mock import patch

from story_gateway import __main__ as cli
from story_gateway import config
from story_gateway.api.exceptions import MissingCredentialError
from story_gateway.core.models import StoryboardSegment


class TestCli:
    """Command dispatch and exit codes."""

    def test_storyboard_prints_json(self, capsys):
        segments = [StoryboardSegment("One.", "prompt one"), StoryboardSegment("Two.", "prompt two")]
        with patch.object(cli, "decompose_storyboard", return_value=segments) as mocked:
            code = cli.main(["--api-key", "k", "storyboard", "One. Two."])

        assert code == 0
        mocked.assert_called_once_with("One. Two.", api_key="k")
        printed = json.loads(capsys.readouterr().out)
        assert printed == [
            {"narrativeText": "One.", "imagePrompt": "prompt one"},
            {"narrativeText": "Two.", "imagePrompt": "prompt two"},
        ]

    def test_storyboard_reads_file(self, tmp_path, capsys):
        story = tmp_path / "story.txt"
        story.write_text("From a file.", encoding="utf-8")
        with patch.object(cli, "decompose_storyboard", return_value=[]) as mocked:
            assert cli.main(["storyboard", str(story)]) == 0
        assert mocked.call_args.args[0] == "From a file."

    def test_speech_without_audio_fails(self, tmp_path):
        with patch.object(cli, "synthesize_speech", return_value=None):
            code = cli.main(["speech", "Hello.", "--out", str(tmp_path / "x.wav")])
        assert code == 1

    def test_error_exit_code(self, capsys):
        with patch.object(cli, "decompose_storyboard", side_effect=MissingCredentialError("no key")):
            assert cli.main(["storyboard", "text"]) == 1
        assert "no key" in capsys.readouterr().err

    def test_set_key_writes_config(self, tmp_path, monkeypatch):
        cfg_path = tmp_path / "cfg.json"
        monkeypatch.setattr(config, "CONFIG_PATH", cfg_path)

        assert cli.main(["set-key", " secret "]) == 0
        assert json.loads(cfg_path.read_text(encoding="utf-8")) == {"api_key": "secret"}
        assert config.load_config() == {"api_key": "secret"}
