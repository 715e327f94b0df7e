"""
Frontier selection strategies for the Growing Tree algorithm.

A selector maps (frontier size, rng) to the index of the frontier cell to
grow from. Always taking the last cell behaves like the Recursive
Backtracker (long winding corridors); always taking a random one behaves
like Prim's algorithm (short branchy corridors). Mixing the two, 50/50 to
start with, usually gives the most interesting mazes.

Selection must be a pure function of the size and the rng state, because
reversing a generation step replays it to find where a retired cell used
to sit in the frontier.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

from growing_maze.config import DEFAULT_PRIM_CHANCE
from growing_maze.core.errors import ConstructionError
from growing_maze.core.rng import ReversibleRandom


class SelectionMode(Enum):
    RANDOM = "random"
    FIRST = "first"
    LAST = "last"
    MIDDLE = "middle"


@dataclass(frozen=True)
class ByPosition:
    mode: SelectionMode

    def __post_init__(self):
        if not isinstance(self.mode, SelectionMode):
            raise ConstructionError(f"not a selection mode: {self.mode!r}")

    def select(self, size: int, rng: ReversibleRandom) -> int:
        return select(self, size, rng)


@dataclass(frozen=True)
class Mixture:
    """Picks one of several selectors at random, in proportion to its weight."""
    choices: Tuple[Tuple["Selector", float], ...]

    def __post_init__(self):
        if not self.choices:
            raise ConstructionError("a mixture needs at least one selector")
        for selector, weight in self.choices:
            if not isinstance(selector, (ByPosition, Mixture)):
                raise ConstructionError(f"not a selector: {selector!r}")
            if weight < 0:
                raise ConstructionError(f"weights must be non-negative, got {weight}")
        if self.total_weight <= 0:
            raise ConstructionError("mixture weights must not all be zero")

    @property
    def total_weight(self) -> float:
        return sum(weight for _, weight in self.choices)

    def select(self, size: int, rng: ReversibleRandom) -> int:
        return select(self, size, rng)


Selector = Union[ByPosition, Mixture]


def select(selector: Selector, size: int, rng: ReversibleRandom) -> int:
    if size <= 0:
        raise ValueError(f"cannot select from an empty frontier (size={size})")

    if isinstance(selector, Mixture):
        roll = rng.next_f64(selector.total_weight)
        cumulative = 0.0
        chosen = None
        for candidate, weight in selector.choices:
            cumulative += weight
            if weight > 0:
                chosen = candidate
                if roll < cumulative:
                    break
        # Float rounding can push roll past the final sum; fall back to the
        # last selector that carries weight.
        return select(chosen, size, rng)

    mode = selector.mode
    if mode is SelectionMode.RANDOM:
        return rng.next_i32(size)
    if mode is SelectionMode.FIRST:
        return 0
    if mode is SelectionMode.LAST:
        return size - 1
    if mode is SelectionMode.MIDDLE:
        return size // 2
    raise AssertionError(f"Unhandled selection mode {mode}")


def mixture(selectors: Sequence[Selector], weights: Sequence[float]) -> Mixture:
    if len(selectors) != len(weights):
        raise ConstructionError(
            f"got {len(selectors)} selectors but {len(weights)} weights")
    return Mixture(tuple(zip(selectors, (float(w) for w in weights))))


def recursive_backtracker() -> ByPosition:
    return ByPosition(SelectionMode.LAST)


def prim_algorithm() -> ByPosition:
    return ByPosition(SelectionMode.RANDOM)


def default_algorithm(prim_chance: float = DEFAULT_PRIM_CHANCE) -> Mixture:
    if not 0.0 <= prim_chance <= 1.0:
        raise ConstructionError(f"prim_chance must be between 0 and 1, got {prim_chance}")
    return mixture([ByPosition(SelectionMode.RANDOM), ByPosition(SelectionMode.LAST)],
                   [prim_chance, 1.0 - prim_chance])


def from_name(name: str, prim_chance: float = DEFAULT_PRIM_CHANCE) -> Selector:
    """Builds a selector from its CLI name."""
    if name == "default":
        return default_algorithm(prim_chance)
    if name == "backtracker":
        return recursive_backtracker()
    if name == "prim":
        return prim_algorithm()
    if name == "first":
        return ByPosition(SelectionMode.FIRST)
    if name == "middle":
        return ByPosition(SelectionMode.MIDDLE)
    raise ValueError(f"Unknown selection algorithm: {name}")
