"""Tests for civ.output.console module."""

from __future__ import annotations

import pytest

from civ.output.console import MockConsole, RichConsole, Style


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_prefixed_helpers(self) -> None:
        console = MockConsole()
        console.success("done")
        console.error("failed")
        console.header("Section")
        assert console.messages == [
            "OK done",
            "error: failed",
            "Section",
        ]
        assert console.has_error()

    def test_find(self) -> None:
        console = MockConsole()
        console.print("version: 1.0.0")
        console.print("dist-tag: dev")
        assert len(console.find("dist-tag")) == 1


class TestRichConsole:
    def test_prints_plain_text(
        self,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        console = RichConsole()
        console.print("1.0.0-feature.x.34")
        console.error("Invalid semver tag: [wibble]")

        out = capsys.readouterr().out
        assert "1.0.0-feature.x.34" in out
        assert "error:" in out
        assert "Invalid semver tag: [wibble]" in out
