"""
Tests for main.py - the CurveSnake game loop.

These tests drive SnakeGame tick by tick with controlled headings, bounds
and apple positions, without any rendering.
"""

import itertools
import threading
import sys
import os
from unittest.mock import Mock, patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig
from domain.collision import Apple, Bounds
from domain.game_state import InvalidTransitionError, Phase
from domain.listener import GameListener
from domain.snake import Journey, Segment
from domain.tick_source import ManualTickSource
import main as main_module
from main import SnakeGame, build_player, run_simulation
from players import RandomPlayer, ScriptedPlayer


def fixed_points(*points):
    """A random_point stand-in that yields the given points, then alternates corners."""
    remaining = list(points)
    corners = itertools.cycle([(1, 1), (2, 2)])

    def _random_point(bounds):
        if remaining:
            return remaining.pop(0)
        x, y = next(corners)
        return (bounds.width - x, bounds.height - y)

    return _random_point


def make_game(width=300, height=300, apples=((10, 10),), **config_kwargs):
    config = GameConfig(width=width, height=height, **config_kwargs)
    return SnakeGame(config=config, random_point=fixed_points(*apples))


class RecordingListener(GameListener):
    def __init__(self):
        self.events = []

    def on_started(self, state):
        self.events.append(("started", state.score))

    def on_tick(self, state, result):
        self.events.append(("tick", result.tick))

    def on_game_over(self, state, result):
        self.events.append(("game_over", result.tick))


class TestStart:
    """Tests for SnakeGame.start()."""

    def test_initial_phase_is_idle(self):
        game = make_game()
        assert game.phase == Phase.IDLE

    def test_start_seeds_state(self):
        game = make_game()
        state = game.start()

        assert state.phase == Phase.RUNNING
        assert state.score == 0
        assert state.tick == 0
        assert list(state.journey) == [Segment((150, 150), (149, 150), (148, 150))]
        assert state.apple == Apple((10, 10), 5)

    def test_start_resets_heading(self):
        game = make_game()
        game.heading.set(0.07)
        game.start()
        assert game.heading.get() == 0.0

    def test_seed_scales_with_pixel_ratio(self):
        game = make_game(width=600, height=600, pixel_ratio=2.0)
        state = game.start()
        assert state.head == Segment((300, 300), (298, 300), (296, 300))
        assert state.apple.radius == 10

    def test_listeners_notified(self):
        game = make_game()
        listener = RecordingListener()
        game.add_listener(listener)
        game.start()
        assert listener.events == [("started", 0)]


class TestTick:
    """Tests for SnakeGame.tick()."""

    def test_tick_requires_running(self):
        game = make_game()
        with pytest.raises(InvalidTransitionError):
            game.tick()

    def test_straight_line_scenario(self):
        """Heading 0 for 5 ticks: y stays 150, x decreases monotonically."""
        game = make_game()
        game.start()
        xs = []
        for _ in range(5):
            result = game.tick()
            assert result.head.end[1] == pytest.approx(150)
            xs.append(result.head.end[0])
        assert xs == pytest.approx([146, 144, 142, 140, 138])
        assert game.state.tick == 5
        assert len(game.state.journey) == 6

    def test_heading_read_each_tick(self):
        game = make_game()
        game.start()
        game.heading.set(0.07)
        turned = game.tick()
        game.heading.set(0.0)
        straight = game.tick()
        assert turned.head.end[1] > 150
        assert straight.head.direction == pytest.approx(turned.head.direction)

    def test_chain_invariant_after_ticks(self):
        game = make_game()
        game.start()
        for i in range(60):
            game.heading.set(0.05 if i % 20 < 10 else -0.05)
            game.tick()
        assert game.state.journey.is_chained()

    def test_eating_scenario(self):
        """Apple within pickup radius of the next tip: score +1, apple moves."""
        game = make_game(apples=((146, 152), (50, 60)))
        game.start()

        result = game.tick()

        assert result.score == 1
        assert game.score == 1
        assert result.apple_eaten == Apple((146, 152), 5)
        assert result.apple_spawned == Apple((50, 60), 5)
        assert game.state.apple.position == (50, 60)
        assert result.game_over is False

    def test_apple_out_of_reach(self):
        game = make_game(apples=((146, 155),))
        game.start()
        result = game.tick()
        assert result.score == 0
        assert result.apple_eaten is None
        assert game.state.apple.position == (146, 155)

    def test_boundary_scenario(self):
        """A tip computed at x=-5 ends the game on that tick."""
        game = make_game()
        game.start()
        game.state.journey = Journey([Segment((-1, 150), (-2, 150), (-3, 150))])

        result = game.tick()

        assert result.head.end == pytest.approx((-5, 150))
        assert result.game_over is True
        assert game.phase == Phase.GAME_OVER
        with pytest.raises(InvalidTransitionError):
            game.tick()

    def test_boundary_takes_precedence_over_eating(self):
        game = make_game(apples=((-5, 150),))
        game.start()
        game.state.journey = Journey([Segment((-1, 150), (-2, 150), (-3, 150))])

        result = game.tick()

        assert result.game_over is True
        assert result.score == 0
        assert result.apple_eaten is None

    def test_bounds_read_fresh_each_tick(self):
        """Shrinking the canvas mid-game is seen on the next tick."""
        bounds = {"value": Bounds(300, 300)}
        game = SnakeGame(
            config=GameConfig(width=300, height=300),
            bounds_provider=lambda: bounds["value"],
            random_point=fixed_points((10, 10)),
        )
        game.start()
        game.tick()
        bounds["value"] = Bounds(100, 300)
        result = game.tick()
        assert result.game_over is True
        assert game.state.bounds == Bounds(100, 300)

    def test_trail_bound(self):
        game = make_game(base_visible_length=10, growth_per_point=2)
        game.start()
        for _ in range(30):
            result = game.tick()
            assert len(game.state.journey) <= 10 + 2 * game.score + 1
        assert len(game.state.journey) == 10
        assert len(result.erased) == 1

    def test_trail_grows_with_score(self):
        game = make_game(base_visible_length=10, growth_per_point=2)
        game.start()
        for _ in range(20):
            game.tick()
        game.state.score = 3
        for _ in range(6):
            result = game.tick()
            assert result.erased == []
        assert len(game.state.journey) == 16
        assert len(game.tick().erased) == 1

    def test_listener_order_on_game_over(self):
        game = make_game()
        listener = RecordingListener()
        game.add_listener(listener)
        game.start()
        game.state.journey = Journey([Segment((-1, 150), (-2, 150), (-3, 150))])
        game.tick()
        assert listener.events == [("started", 0), ("tick", 1), ("game_over", 1)]


class TestRestart:
    """Restart must fully reset the core state."""

    def test_restart_after_game_over(self):
        game = make_game(apples=((146, 152), (50, 60), (70, 80)))
        game.start()
        game.tick()
        game.heading.set(0.5)
        game.state.journey = Journey([Segment((-1, 150), (-2, 150), (-3, 150))])
        game.tick()
        assert game.phase == Phase.GAME_OVER

        state = game.start()

        assert state.phase == Phase.RUNNING
        assert state.score == 0
        assert state.tick == 0
        assert len(state.journey) == 1
        assert state.head.end == (148, 150)
        assert game.heading.get() == 0.0
        assert state.apple.position == (70, 80)

    def test_restart_bumps_epoch(self):
        game = make_game()
        game.start()
        first = game.epoch
        game.start()
        assert game.epoch == first + 1


class TestRun:
    """Tests for SnakeGame.run()."""

    def test_runs_until_game_over(self):
        game = make_game(width=20, height=20)
        ticks = game.run(ManualTickSource())
        # Straight from x=8 at 2px per tick: x=-2 on tick 5
        assert ticks == 5
        assert game.phase == Phase.GAME_OVER

    def test_max_ticks(self):
        game = make_game()
        assert game.run(ManualTickSource(), max_ticks=7) == 7
        assert game.phase == Phase.RUNNING

    def test_tick_source_stop(self):
        game = make_game()
        assert game.run(ManualTickSource(limit=3)) == 4

    def test_player_sets_heading(self):
        game = make_game()
        player = ScriptedPlayer([0.07, 0.07, -0.07])
        game.run(ManualTickSource(), player=player, max_ticks=4)
        assert game.heading.get() == 0.0
        assert player.position == 3

    def test_restart_stops_stale_loop(self):
        """A restart issued during a wait ends the old loop without another tick."""
        game = make_game()
        source = Mock()

        def restart_during_wait():
            game.start()
            return True

        source.wait.side_effect = restart_during_wait
        ticks = game.run(source)

        assert ticks == 1
        assert game.state.tick == 0
        assert game.phase == Phase.RUNNING

    def test_restart_while_choosing_heading(self):
        """A restart issued by the player leaves the new run untouched."""
        game = make_game()

        class RestartingPlayer(ScriptedPlayer):
            def get_heading(self, state):
                if not self.restarted:
                    self.restarted = True
                    game.start()
                return 0.5

        player = RestartingPlayer()
        player.restarted = False
        ticks = game.run(ManualTickSource(), player=player, max_ticks=3)

        assert ticks == 0
        assert game.state.tick == 0
        assert len(game.state.journey) == 1
        assert game.heading.get() == 0.0
        assert game.phase == Phase.RUNNING

    def test_deterministic_runs(self):
        def play():
            config = GameConfig(width=400, height=300, seed=5)
            game = SnakeGame(config=config)
            game.run(ManualTickSource(), player=build_player("random", config), max_ticks=300)
            return [s.end for s in game.state.journey], game.score, game.state.apple

        assert play() == play()

    def test_heading_thread_writes(self):
        game = make_game()
        game.start()
        writer = threading.Thread(target=lambda: game.heading.set(0.07))
        writer.start()
        writer.join()
        assert game.tick().head.end[1] > 150


class TestRunSimulation:
    """Tests for run_simulation() and build_player()."""

    def test_summary(self):
        config = GameConfig(width=200, height=200, seed=1)
        summary = run_simulation(config, player=ScriptedPlayer(), max_ticks=10)
        assert summary["ticks"] == 10
        assert summary["score"] >= 0
        assert summary["phase"] == "running"
        assert summary["head"] == pytest.approx([78, 100])

    def test_build_player(self):
        config = GameConfig(seed=3, turn_rate=0.1)
        player = build_player("random", config)
        assert isinstance(player, RandomPlayer)
        assert player.turn_rate == 0.1

    def test_build_unknown_player(self):
        with pytest.raises(ValueError):
            build_player("telepathy", GameConfig())


class TestMainCli:
    """Tests for the main() command line entry point."""

    def test_prints_summary(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", [
            "main.py", "--width", "200", "--height", "200",
            "--player", "scripted", "--max-ticks", "10",
        ])
        main_module.main()

        out = capsys.readouterr().out
        assert "Simulation Result Summary" in out
        assert '"ticks": 10' in out

    def test_unknown_player_exits(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py", "--player", "telepathy"])
        with pytest.raises(SystemExit) as excinfo:
            main_module.main()

        assert excinfo.value.code == 1
        assert "Simulation Result Summary" not in capsys.readouterr().out

    def test_invalid_canvas_exits(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["main.py", "--width", "0"])
        with pytest.raises(SystemExit) as excinfo:
            main_module.main()
        assert excinfo.value.code == 1

    def test_keyboard_interrupt_exits(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py", "--max-ticks", "10"])
        with patch.object(SnakeGame, "run", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as excinfo:
                main_module.main()

        assert excinfo.value.code == 1
        assert "Simulation Result Summary" not in capsys.readouterr().out
