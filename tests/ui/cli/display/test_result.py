"""Tests for result display functionality."""

from io import StringIO

import pytest
from rich.console import Console

from keypath.features.path import KeyPath, validate_component, KeyPathError
from keypath.ui.cli.display.result import ResultDisplay
from keypath.ui.cli.models import CheckResult


@pytest.fixture
def display() -> ResultDisplay:
    """Create a display that renders into memory."""

    result_display = ResultDisplay()
    result_display.console = Console(file=StringIO(), width=120, color_system=None)
    return result_display


def _output(display: ResultDisplay) -> str:
    file = display.console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


def _rejected(component: str) -> CheckResult:
    try:
        _ = validate_component(component)
    except KeyPathError as e:
        return CheckResult(component, e)
    raise AssertionError(f"{component!r} was expected to be rejected")


def test_show_key(display: ResultDisplay) -> None:
    display.show_key(KeyPath(["foo", "bar"]))
    assert _output(display) == "foo/bar\n"


def test_show_components_table(display: ResultDisplay) -> None:
    display.show_components(KeyPath(["foo", "bar"]))

    output = _output(display)
    assert "Key Components" in output
    assert "foo" in output
    assert "bar" in output


def test_show_components_quiet(display: ResultDisplay) -> None:
    display.show_components(KeyPath(["foo", "bar"]), quiet=True)
    assert _output(display).splitlines() == ["foo", "bar"]


def test_show_check_results(display: ResultDisplay) -> None:
    """Markup-like component text is printed literally."""

    results = [CheckResult("ok"), _rejected("[red]x"), _rejected("..")]
    display.show_check_results(results)

    output = _output(display)
    assert "[red]x" in output
    assert "invalid_character" in output
    assert "traversal_segment" in output
    assert "Checked: 3  Rejected: 2" in output


def test_show_check_results_quiet(display: ResultDisplay) -> None:
    """Quiet mode keeps one verdict per component and drops the table."""

    display.show_check_results([CheckResult("a.txt"), _rejected("x y"), _rejected("")], quiet=True)

    lines = _output(display).splitlines()
    assert [line.rsplit(maxsplit=1)[-1] for line in lines] == ["ok", "invalid_character", "empty_component"]
    assert lines[0].split() == ["a.txt", "ok"]
    assert lines[1].startswith("x y")
    assert "Component Check" not in _output(display)
