"""Ten-pin bowling scoring engine.

``BowlingGame`` records pinfall one ball at a time and scores the first ten
frames by walking the recorded rolls with a cursor. Bonus balls after the
tenth frame are only read as lookahead.

The module-level ``init_state``/``apply``/``summary`` functions expose the
same engine through the event protocol shared by the scoring engines.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple, Union

MAX_PINS = 10
FRAMES_PER_GAME = 10


class IncompleteGameError(Exception):
    """Raised when the recorded rolls cannot resolve a frame's score."""

    def __init__(self, frame: int, needed: int, available: int) -> None:
        super().__init__(
            f"frame {frame} needs roll #{needed + 1} but only {available} recorded"
        )
        self.frame = frame
        self.needed = needed
        self.available = available


@dataclass(frozen=True)
class Strike:
    bonus: Tuple[int, int]


@dataclass(frozen=True)
class Spare:
    first: int
    second: int
    bonus: int


@dataclass(frozen=True)
class Open:
    first: int
    second: int


Frame = Union[Strike, Spare, Open]


def frame_score(frame: Frame) -> int:
    if isinstance(frame, Strike):
        return MAX_PINS + frame.bonus[0] + frame.bonus[1]
    if isinstance(frame, Spare):
        return MAX_PINS + frame.bonus
    return frame.first + frame.second


def frame_kind(frame: Frame) -> str:
    return type(frame).__name__.lower()


def frame_rolls(frame: Frame) -> List[int]:
    """Balls thrown in the frame itself, bonus balls excluded."""
    if isinstance(frame, Strike):
        return [MAX_PINS]
    return [frame.first, frame.second]


class BowlingGame:
    """Roll sequence for a single game plus its scoring."""

    def __init__(self) -> None:
        self._rolls: List[int] = []

    @property
    def rolls(self) -> List[int]:
        return list(self._rolls)

    def record(self, points: int) -> None:
        self._rolls.append(points)

    def _roll(self, index: int, frame: int) -> int:
        if index >= len(self._rolls):
            raise IncompleteGameError(frame, index, len(self._rolls))
        return self._rolls[index]

    def iter_frames(self) -> Iterator[Frame]:
        """Yield the ten frames in order.

        Each frame is yielded as soon as its own balls and bonus balls are
        available; ``IncompleteGameError`` is raised at the first frame that
        cannot be resolved. A strike is always checked before a spare.
        """
        cursor = 0
        for number in range(1, FRAMES_PER_GAME + 1):
            first = self._roll(cursor, number)
            if first == MAX_PINS:
                yield Strike(
                    bonus=(self._roll(cursor + 1, number), self._roll(cursor + 2, number))
                )
                cursor += 1
                continue
            second = self._roll(cursor + 1, number)
            if first + second == MAX_PINS:
                yield Spare(first, second, bonus=self._roll(cursor + 2, number))
            else:
                yield Open(first, second)
            cursor += 2

    def frames(self) -> List[Frame]:
        return list(self.iter_frames())

    def frame_scores(self) -> List[int]:
        return [frame_score(f) for f in self.iter_frames()]

    def cumulative_scores(self) -> List[int]:
        running = 0
        totals = []
        for value in self.frame_scores():
            running += value
            totals.append(running)
        return totals

    def score(self) -> int:
        return sum(self.frame_scores())

    def is_complete(self) -> bool:
        try:
            self.frames()
        except IncompleteGameError:
            return False
        return True


def init_state(config: Dict) -> Dict:
    return {"config": config, "rolls": []}


def roll_from_event(event: Dict) -> int:
    """Return the pinfall carried by a ROLL event or raise ``ValueError``."""
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    pins = event.get("pins")
    # bool is an int subclass
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise ValueError("pins must be an integer")
    if not 0 <= pins <= MAX_PINS:
        raise ValueError("pins out of range")
    return pins


def apply(event: Dict, state: Dict) -> Dict:
    state["rolls"].append(roll_from_event(event))
    return state


def game_from_state(state: Dict) -> BowlingGame:
    game = BowlingGame()
    for pins in state["rolls"]:
        game.record(pins)
    return game


def summarize_game(game: BowlingGame) -> Dict:
    """Describe every resolvable frame of ``game``.

    ``total`` stays ``None`` until all ten frames can be scored.
    """
    frames = []
    running = 0
    complete = True
    try:
        for frame in game.iter_frames():
            value = frame_score(frame)
            running += value
            frames.append(
                {
                    "kind": frame_kind(frame),
                    "rolls": frame_rolls(frame),
                    "score": value,
                    "cumulative": running,
                }
            )
    except IncompleteGameError:
        complete = False
    return {
        "rolls": game.rolls,
        "frames": frames,
        "complete": complete,
        "total": running if complete else None,
    }


def summary(state: Dict) -> Dict:
    return summarize_game(game_from_state(state))
