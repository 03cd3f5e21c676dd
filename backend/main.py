import argparse
import json
import logging
import random
import sys
import threading
import uuid
from dataclasses import replace
from typing import Callable, Dict, Any, List, Optional

from config import GameConfig
from domain.collision import (
    Bounds,
    RandomPoint,
    is_eating,
    is_out_of_bounds,
    spawn_apple,
    uniform_random_point,
)
from domain.game_state import (
    GameEvent,
    GameState,
    InvalidTransitionError,
    Phase,
    TickResult,
    transition,
)
from domain.heading import HeadingCell
from domain.listener import GameListener
from domain.motion import advance, seed_segment
from domain.snake import Journey
from domain.tick_source import FixedIntervalTickSource, ManualTickSource, TickSource
from domain.trail import truncate
from players import Player, get_player_class

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Owns the game state and runs the tick sequence:
    motion -> boundary check -> feeding -> trail truncation -> listeners.

    bounds_provider is read on every tick so the canvas may be resized while
    playing. random_point draws apple positions; pass a seeded generator for
    reproducible runs.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        bounds_provider: Optional[Callable[[], Bounds]] = None,
        random_point: Optional[RandomPoint] = None,
        heading: Optional[HeadingCell] = None,
        game_id: Optional[str] = None,
    ):
        self.config = config or GameConfig()
        self.config.validate()

        if bounds_provider is None:
            fixed = Bounds(self.config.width, self.config.height)
            bounds_provider = lambda: fixed  # noqa: E731
        self.bounds_provider = bounds_provider

        if random_point is None:
            random_point = uniform_random_point(random.Random(self.config.seed))
        self.random_point = random_point

        self.heading = heading or HeadingCell()
        self.game_id = game_id or str(uuid.uuid4())
        self.listeners: List[GameListener] = []

        # Bumped on every start so loops from an earlier run stop themselves
        self.epoch = 0
        self._lock = threading.RLock()

        self.state = GameState(bounds=self.bounds_provider())

    def add_listener(self, listener: GameListener) -> None:
        self.listeners.append(listener)

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    def start(self) -> GameState:
        """Start a new run (or restart), resetting every piece of core state."""
        with self._lock:
            phase = transition(self.state.phase, GameEvent.START)
            bounds = self.bounds_provider()

            self.heading.reset()
            self.epoch += 1
            self.state = GameState(
                bounds=bounds,
                phase=phase,
                journey=Journey([seed_segment(bounds.center, self.config.scale(1))]),
                score=0,
                apple=spawn_apple(bounds, self.random_point, self.config.scaled_apple_radius),
                tick=0,
            )
            logger.info(f"Game {self.game_id} started (run {self.epoch}) on {bounds.width}x{bounds.height}")

            for listener in self.listeners:
                listener.on_started(self.state)
            return self.state

    def tick(self) -> TickResult:
        """
        Advance the snake by one segment.

        Raises:
            InvalidTransitionError: if the game is not running.
        """
        with self._lock:
            state = self.state
            if state.phase != Phase.RUNNING:
                raise InvalidTransitionError(state.phase, GameEvent.TICK)

            state.bounds = self.bounds_provider()
            heading = self.heading.get()

            head = advance(state.journey.head, heading)
            state.journey.push_head(head)
            state.tick += 1

            if is_out_of_bounds(head.end, state.bounds):
                state.phase = transition(state.phase, GameEvent.BOUNDARY_VIOLATION)
                result = TickResult(tick=state.tick, head=head, score=state.score, game_over=True)
                logger.info(
                    f"Game {self.game_id} over on tick {state.tick} at "
                    f"({head.end[0]:.1f}, {head.end[1]:.1f}) with score {state.score}"
                )
                for listener in self.listeners:
                    listener.on_tick(state, result)
                for listener in self.listeners:
                    listener.on_game_over(state, result)
                return result

            apple_eaten = None
            apple_spawned = None
            if is_eating(head.end, state.apple, self.config.scaled_pickup_radius):
                apple_eaten = state.apple
                state.score += 1
                apple_spawned = spawn_apple(
                    state.bounds,
                    self.random_point,
                    self.config.scaled_apple_radius,
                    previous=apple_eaten,
                )
                state.apple = apple_spawned
                logger.debug(f"Apple eaten at {apple_eaten.position}, score {state.score}")

            erased = truncate(
                state.journey,
                state.score,
                self.config.scaled_base_visible_length,
                self.config.growth_per_point,
            )

            state.phase = transition(state.phase, GameEvent.TICK)
            result = TickResult(
                tick=state.tick,
                head=head,
                erased=erased,
                score=state.score,
                apple_eaten=apple_eaten,
                apple_spawned=apple_spawned,
            )
            for listener in self.listeners:
                listener.on_tick(state, result)
            return result

    def run(
        self,
        tick_source: TickSource,
        player: Optional[Player] = None,
        max_ticks: Optional[int] = None,
    ) -> int:
        """
        Tick until game over, cancellation, ``max_ticks`` or a restart.

        Starts a game first unless one is already running. When ``player``
        is given it sets the heading before every tick. Returns the number of
        ticks this loop ran.

        The epoch is checked under the lock right before the heading is
        written and the tick applied, so once another caller restarts the
        game this loop never touches the new run.
        """
        with self._lock:
            if self.state.phase != Phase.RUNNING:
                self.start()
            epoch = self.epoch
        ticks = 0

        while True:
            with self._lock:
                if self.epoch != epoch or self.state.phase != Phase.RUNNING:
                    break
                if player is not None:
                    heading = player.get_heading(self.state)
                    # The player itself may have restarted the game
                    if self.epoch != epoch:
                        break
                    self.heading.set(heading)
                result = self.tick()
            ticks += 1

            if result.game_over:
                break
            if max_ticks is not None and ticks >= max_ticks:
                break
            if not tick_source.wait():
                break

        return ticks

    def summary(self) -> Dict[str, Any]:
        head = self.state.head
        return {
            "game_id": self.game_id,
            "phase": self.state.phase.value,
            "ticks": self.state.tick,
            "score": self.state.score,
            "journey_length": len(self.state.journey),
            "head": list(head.end) if head is not None else None,
            "apple": list(self.state.apple.position) if self.state.apple else None,
        }

    def print_board(self):
        """
        Prints a coarse text picture of the current canvas.
        """
        print("\n" + self.state.print_board() + "\n")


# -------------------------------
# Simulation Function
# -------------------------------

def build_player(player_key: str, config: GameConfig) -> Player:
    """Instantiate a registered player suited to headless runs."""
    player_class = get_player_class(player_key)
    if player_key == "random":
        return player_class(turn_rate=config.turn_rate, rng=random.Random(config.seed))
    if player_key in ("keyboard", "pointer"):
        return player_class(turn_rate=config.turn_rate)
    return player_class()


def run_simulation(
    config: GameConfig,
    player: Optional[Player] = None,
    max_ticks: Optional[int] = None,
    tick_source: Optional[TickSource] = None,
    listeners: Optional[List[GameListener]] = None,
) -> Dict[str, Any]:
    """
    Runs a single game until it ends or ``max_ticks`` elapse.

    Args:
        config: Game settings (canvas size, constants, seed).
        player: Steering logic; defaults to the random autopilot.
        max_ticks: Optional upper limit on ticks.
        tick_source: Loop cadence; defaults to no waiting at all.
        listeners: Optional collaborators (e.g. a renderer) to attach.

    Returns:
        A dictionary summarizing the game (game_id, ticks, score, phase, ...).
    """
    game = SnakeGame(config=config)
    for listener in listeners or []:
        game.add_listener(listener)

    if player is None:
        player = build_player("random", config)
    if tick_source is None:
        tick_source = ManualTickSource()

    game.start()
    game.run(tick_source, player=player, max_ticks=max_ticks)
    return game.summary()


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless CurveSnake game with an autopilot player."
    )
    defaults = GameConfig.from_env()
    parser.add_argument("--width", type=float, default=defaults.width,
                        help="Canvas width in device pixels")
    parser.add_argument("--height", type=float, default=defaults.height,
                        help="Canvas height in device pixels")
    parser.add_argument("--pixel-ratio", type=float, default=defaults.pixel_ratio,
                        help="Device pixel ratio used to scale sizes")
    parser.add_argument("--player", type=str, default="random",
                        help="Player to steer with (random, scripted, ...)")
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help="Random seed for apples and the autopilot")
    parser.add_argument("--max-ticks", type=int, default=5000,
                        help="Maximum number of ticks")
    parser.add_argument("--interval", type=float, default=0.0,
                        help="Seconds to wait between ticks (0 runs flat out)")
    parser.add_argument("--board", action="store_true",
                        help="Print a text picture of the final canvas")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    tick_source: Optional[TickSource] = None
    try:
        config = replace(
            defaults,
            width=args.width,
            height=args.height,
            pixel_ratio=args.pixel_ratio,
            tick_interval=args.interval,
            seed=args.seed,
        )
        config.validate()

        if args.interval > 0:
            tick_source = FixedIntervalTickSource(args.interval)
        else:
            tick_source = ManualTickSource()

        game = SnakeGame(config=config)
        player = build_player(args.player, config)
        game.start()
        game.run(tick_source, player=player, max_ticks=args.max_ticks)

    except KeyboardInterrupt:
        if tick_source is not None:
            tick_source.cancel()
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)

    if args.board:
        game.print_board()

    print("\nSimulation Result Summary:")
    print(json.dumps(game.summary(), indent=2))


if __name__ == "__main__":
    main()
