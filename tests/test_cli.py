"""
Tests for the command line front-end.

Drive the interactive loop with in-memory streams.
"""

import io

import pytest

from pairwise_ranker.__main__ import (
    args_to_typed,
    build_controller,
    format_history,
    format_prompt,
    format_ratings,
    interactive_loop,
    main,
    parse_args,
    run_command,
)
from pairwise_ranker.controller import SessionConfig, SessionController
from pairwise_ranker.group_selectors import RandomSelector
from pairwise_ranker.models import Matchup


@pytest.fixture
def controller(first_choice_selector: RandomSelector) -> SessionController:
    return SessionController(SessionConfig(), selector=first_choice_selector)


class TestArguments:
    """Test argument parsing and wiring."""

    def test_defaults(self) -> None:
        args = args_to_typed(parse_args([]))
        assert args["items"] == []
        assert args["k_factor"] == 40.0
        assert args["seed"] is None
        assert args["selector"] == "random"
        assert args["rng"] == "stdlib"
        assert args["log_file"] is None

    def test_build_controller_with_items(self) -> None:
        # Arrange
        args = args_to_typed(parse_args(["--item", "A", "--item", "B", "--item", "A", "--k-factor", "32", "--seed", "3"]))

        # Act
        controller = build_controller(args)

        # Assert
        assert controller.state.items == frozenset({"A", "B"})
        assert controller.state.k_factor == 32.0
        assert controller.state.candidate is not None

    def test_invalid_choice_exits(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--selector", "uncertainty"])


class TestCommands:
    """Test single interactive commands."""

    def test_add_and_confirm(self, controller: SessionController) -> None:
        # Arrange
        out = io.StringIO()

        # Act
        for line in ["add A", "add B", "1", "2", ""]:
            assert run_command(controller, line, out)

        # Assert
        assert controller.state.history == (
            Matchup(winning="A", losing="B"),
            Matchup(winning="B", losing="A"),
            Matchup(winning="A", losing="B"),
        )
        assert out.getvalue() == ""

    def test_edit_commands(self, controller: SessionController) -> None:
        out = io.StringIO()
        for line in ["add A", "add B", "add C", "win C", "lose A"]:
            run_command(controller, line, out)
        assert controller.state.candidate == Matchup(winning="C", losing="A")

    def test_k_commands(self, controller: SessionController) -> None:
        out = io.StringIO()
        for line in ["k+", "k+", "k-", "k+"]:
            run_command(controller, line, out)
        assert controller.state.k_factor == 42.0

    def test_quit(self, controller: SessionController) -> None:
        assert run_command(controller, "quit", io.StringIO()) is False

    def test_unknown_command(self, controller: SessionController) -> None:
        out = io.StringIO()
        assert run_command(controller, "dance", out)
        assert "Unknown command" in out.getvalue()

    def test_help(self, controller: SessionController) -> None:
        out = io.StringIO()
        run_command(controller, "help", out)
        assert "add NAME" in out.getvalue()


class TestFormatting:
    """Test rendered output."""

    def test_ratings_table_rounds(self, controller: SessionController) -> None:
        # Arrange
        controller.add_item("A")
        controller.add_item("B")
        controller.commit()

        # Act
        table = format_ratings(controller)

        # Assert
        assert "1520" in table
        assert "1480" in table
        assert "100.0%" in table
        assert table.index("A") < table.index("B"), "Higher rating should be listed first"

    def test_history_newest_first(self, controller: SessionController) -> None:
        assert format_history(controller) == "No comparisons yet."
        controller.add_item("A")
        controller.add_item("B")
        controller.commit()
        controller.commit_swapped()
        assert format_history(controller) == "   2. B beat A\n   1. A beat B"

    def test_prompt(self, controller: SessionController) -> None:
        assert "at least two items" in format_prompt(controller)
        controller.add_item("A")
        controller.add_item("B")
        assert format_prompt(controller) == "[1] A  vs  [2] B  (k=40, p1=50%)"


class TestInteractiveLoop:
    """Test the read loop."""

    def test_runs_until_quit(self, controller: SessionController) -> None:
        # Arrange
        stdin = io.StringIO("add A\nadd B\n1\nquit\nadd C\n")
        out = io.StringIO()

        # Act
        interactive_loop(controller, stdin=stdin, out=out)

        # Assert
        assert controller.state.items == frozenset({"A", "B"}), "Input after quit should not be read"
        assert len(controller.state.history) == 1
        assert "[1] A  vs  [2] B" in out.getvalue()

    def test_stops_at_eof(self, controller: SessionController) -> None:
        interactive_loop(controller, stdin=io.StringIO("add A\n"), out=io.StringIO())
        assert controller.state.items == frozenset({"A"})

    def test_main_prints_final_rankings(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        # Arrange
        monkeypatch.setattr("sys.stdin", io.StringIO("1\nratings\nquit\n"))

        # Act
        main(["--item", "A", "--item", "B", "--seed", "1"])

        # Assert
        output = capsys.readouterr().out
        assert "Final Rankings:" in output
        assert "1520" in output
        assert "1480" in output
