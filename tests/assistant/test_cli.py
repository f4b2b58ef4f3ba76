"""Unit tests for the CLI terminal formatting and commands.

The chat loop is exercised with a patched completion client and scripted
input; no network access is needed.
"""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json
from unittest.mock import patch

from cooling_ai.assistant.cli import format_units, main
from cooling_ai.assistant.config import API_KEY_ENV
from cooling_ai.markup.render import render_document


class TestFormatUnits:

    def test_line_kinds(self):
        out = format_units(render_document("## Overview\n### Detail\n- item\ntext"))
        assert out.splitlines() == ["Overview", "========", "> Detail", "  * item", "text"]

    def test_markup_removed(self):
        out = format_units(render_document("Set **supply** to $7.0$"))
        assert out == "Set supply to 7.0"

    def test_table_columns_padded(self):
        out = format_units(render_document("| a | bbb |\n|---|---|\n| 1 | 2 |"))
        assert out.splitlines() == ["a | bbb", "--+----", "1 | 2"]

    def test_ragged_table(self):
        out = format_units(render_document("| a |\n| 1 | 2 |"))
        assert out.splitlines()[-1] == "1 | 2"


class TestRenderCommand:

    def test_plain_output(self, tmp_path, capsys):
        path = tmp_path / "reply.md"
        path.write_text("### Title\n- item", encoding="utf-8")
        assert main(["render", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == ["> Title", "  * item"]

    def test_json_output(self, tmp_path, capsys):
        path = tmp_path / "reply.md"
        path.write_text("**hot**", encoding="utf-8")
        assert main(["render", str(path), "--json"]) == 0
        units = json.loads(capsys.readouterr().out)
        assert units == [{"kind": "paragraph", "spans": [{"kind": "emphasis", "text": "hot"}]}]


class TestChatCommand:

    def test_missing_key_exits_nonzero(self, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV, raising=False)
        assert main(["chat"]) == 1

    def test_loop_prints_reply_and_quits(self, monkeypatch, capsys):
        monkeypatch.setenv(API_KEY_ENV, "k")
        answers = iter(["what is the COP?", "x"])
        with patch("cooling_ai.assistant.client.RetryingCompletionClient.complete", return_value="- COP is **4.2**"), patch(
            "builtins.input", side_effect=lambda _prompt: next(answers)
        ):
            assert main(["chat"]) == 0
        out = capsys.readouterr().out
        assert "Current operating overview" in out
        assert "  * COP is 4.2" in out
