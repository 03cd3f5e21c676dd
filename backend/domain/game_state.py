"""
GameState entity and the game's state machine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .collision import Apple, Bounds
from .snake import Journey, Segment


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameEvent(Enum):
    START = "start"
    TICK = "tick"
    BOUNDARY_VIOLATION = "boundary_violation"


class InvalidTransitionError(ValueError):
    """Raised when an event is not allowed in the current phase."""

    def __init__(self, phase: Phase, event: GameEvent):
        super().__init__(f"Event '{event.value}' is not allowed while {phase.value}")
        self.phase = phase
        self.event = event


_TRANSITIONS = {
    (Phase.IDLE, GameEvent.START): Phase.RUNNING,
    (Phase.RUNNING, GameEvent.START): Phase.RUNNING,
    (Phase.RUNNING, GameEvent.TICK): Phase.RUNNING,
    (Phase.RUNNING, GameEvent.BOUNDARY_VIOLATION): Phase.GAME_OVER,
    (Phase.GAME_OVER, GameEvent.START): Phase.RUNNING,
}


def transition(phase: Phase, event: GameEvent) -> Phase:
    """
    Return the phase reached from ``phase`` on ``event``.

    Raises:
        InvalidTransitionError: if the event is not allowed in ``phase``.
    """
    try:
        return _TRANSITIONS[(phase, event)]
    except KeyError:
        raise InvalidTransitionError(phase, event) from None


@dataclass
class TickResult:
    """
    Everything a renderer needs to update after one tick.

    Attributes:
        tick: 1-based tick number within the current run
        head: the newly added head segment
        erased: tail segments removed this tick, oldest first
        score: score after the tick
        apple_eaten: the apple consumed this tick, if any
        apple_spawned: its replacement, if any
        game_over: True when the head left the canvas on this tick
    """

    tick: int
    head: Segment
    erased: List[Segment] = field(default_factory=list)
    score: int = 0
    apple_eaten: Optional[Apple] = None
    apple_spawned: Optional[Apple] = None
    game_over: bool = False


class GameState:
    """
    All mutable state of one game, owned by the game loop.

    Attributes:
        phase: current state machine phase
        journey: the snake path, head first
        score: apples eaten this run
        apple: the current apple, None before the first start
        tick: ticks run since the last start
        bounds: the canvas bounds read on the latest tick
    """

    def __init__(
        self,
        bounds: Bounds,
        phase: Phase = Phase.IDLE,
        journey: Optional[Journey] = None,
        score: int = 0,
        apple: Optional[Apple] = None,
        tick: int = 0,
    ):
        self.phase = phase
        self.journey = journey if journey is not None else Journey()
        self.score = score
        self.apple = apple
        self.tick = tick
        self.bounds = bounds

    @property
    def head(self) -> Optional[Segment]:
        return self.journey.head if len(self.journey) else None

    def print_board(self, columns: int = 40, rows: int = 20) -> str:
        """
        Returns a coarse text picture of the canvas with:
        . = empty space
        A = apple
        T = snake trail
        0 = snake head
        Row 0 is the top of the canvas, matching canvas coordinates.
        """
        board = [['.' for _ in range(columns)] for _ in range(rows)]

        def cell(point):
            cx = int(point[0] / self.bounds.width * columns) if self.bounds.width else 0
            cy = int(point[1] / self.bounds.height * rows) if self.bounds.height else 0
            if 0 <= cx < columns and 0 <= cy < rows:
                return cx, cy
            return None

        if self.apple is not None:
            pos = cell(self.apple.position)
            if pos:
                board[pos[1]][pos[0]] = 'A'

        # Oldest first so the head wins shared cells
        for segment in reversed(list(self.journey)):
            pos = cell(segment.end)
            if pos:
                board[pos[1]][pos[0]] = 'T'
        if self.head is not None:
            pos = cell(self.head.end)
            if pos:
                board[pos[1]][pos[0]] = '0'

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState phase={self.phase.value}, tick={self.tick}, "
            f"score={self.score}, segments={len(self.journey)}, apple={self.apple}>"
        )
