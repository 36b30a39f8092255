"""Tests for freightctl.output.console module."""

from __future__ import annotations

import pytest

from freightctl.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.ERROR) == "error"
        assert str(Style.DIM) == "dim"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_error_prefix(self) -> None:
        console = MockConsole()
        console.error("promote stage: unavailable")
        assert console.messages == ["error: promote stage: unavailable"]
        assert console.has_error()

    def test_info_and_warning(self) -> None:
        console = MockConsole()
        console.info("server: http://localhost")
        console.warning("careful")
        assert console.text == "info: server: http://localhost\nwarning: careful"
        assert not console.has_error()

    def test_find(self) -> None:
        console = MockConsole()
        console.success("default project set")
        console.print("hint: something", Style.DIM)
        assert len(console.find("hint:")) == 1

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("typed")


class TestRichConsole:
    def test_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("boom [not markup]")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error:" in captured.err
        assert "boom [not markup]" in captured.err

    def test_info_hidden_unless_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().info("quiet")
        assert capsys.readouterr().err == ""

        RichConsole(verbose=True).info("loud")
        assert "info: loud" in capsys.readouterr().err
