"""Tests for the numbered-menu ClickPrompter."""

import click
from click.testing import CliRunner

from ignix.cli.output import machine_output
from ignix.core.prompter import Choice, ClickPrompter

CHOICES = [Choice(title="Button", value="button"), Choice(title="Card", value="card")]


@click.command()
def _pick() -> None:
    selected = ClickPrompter().select("Select a component to add:", CHOICES)
    machine_output(repr(selected))


def test_number_selects_choice() -> None:
    result = CliRunner().invoke(_pick, input="2\n")

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines()[-1] == "'card'"
    assert "  1. Button" in result.stderr
    assert "  2. Card" in result.stderr


def test_blank_answer_cancels() -> None:
    result = CliRunner().invoke(_pick, input="\n")

    assert result.stdout.splitlines()[-1] == "None"


def test_out_of_range_answer_cancels() -> None:
    result = CliRunner().invoke(_pick, input="7\n")

    assert result.stdout.splitlines()[-1] == "None"
    assert "Invalid selection: 7" in result.stderr


def test_no_choices_returns_none_without_prompting() -> None:
    assert ClickPrompter().select("Select a theme to add:", []) is None
