"""Tests for the terminal read-eval loop."""

import io
from datetime import datetime

from adventure.play.clock import ClockService
from adventure.play.engine import INVALID_ROOM_MESSAGE, TraversalEngine
from adventure.play.session import run_session


def _play(engine, lines):
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    summary = run_session(engine, stdin=stdin, stdout=stdout)
    return summary, stdout.getvalue()


class TestRunSession:
    def test_plays_to_the_end(self, small_graph):
        summary, output = _play(TraversalEngine(small_graph), ["KITCHEN", "DUNGEON"])
        assert summary is not None
        assert summary.steps == 2
        assert summary.path == ["KITCHEN", "DUNGEON"]
        assert output.startswith(
            "CURRENT LOCATION: FOYER\n"
            "POSSIBLE CONNECTIONS: KITCHEN, BASEMENT, DARK_ROOM.\n"
            "WHERE TO? >\n"
            "CURRENT LOCATION: KITCHEN\n"
        )
        assert output.endswith(
            "YOU HAVE FOUND THE END ROOM. CONGRATULATIONS!\n"
            "YOU TOOK 2 STEPS. YOUR PATH TO VICTORY WAS:\n"
            "KITCHEN\n"
            "DUNGEON\n"
        )

    def test_invalid_input_reported_inline(self, small_graph):
        summary, output = _play(
            TraversalEngine(small_graph), ["ATTIC", "BASEMENT", "DUNGEON"],
        )
        assert f"\n{INVALID_ROOM_MESSAGE}\n\n" in output
        assert summary.path == ["BASEMENT", "DUNGEON"]
        assert output.count("CURRENT LOCATION: FOYER") == 2

    def test_input_closed_before_end(self, small_graph):
        summary, output = _play(TraversalEngine(small_graph), ["KITCHEN"])
        assert summary is None
        assert "CONGRATULATIONS" not in output

    def test_time_command_mid_game(self, small_graph):
        clock = ClockService(
            interval=0.01,
            handoff_delay=0.2,
            grace=1.0,
            now=lambda: datetime(2017, 7, 18, 15, 7),
        )
        with clock:
            summary, output = _play(
                TraversalEngine(small_graph, clock=clock),
                ["time", "KITCHEN", "DUNGEON"],
            )
        assert "\n3:07pm, Tuesday, July 18, 2017\n\n" in output
        assert summary.path == ["KITCHEN", "DUNGEON"]
