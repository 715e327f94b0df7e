"""
Reversible pseudo-random number generation.

ReversibleRandom is a 64-bit xorshift generator that keeps a history of
checkpointed seeds, so that a caller can undo or replay the random numbers
consumed between checkpoints. A trace, with letters standing for seeds and
the caret marking `index`:

    call                     seed   history     index
    ReversibleRandom(A)      A      [A]         0
    next_i32(n)              B      [A]         0
    advance_generator()      B      [A, B]      1     (checkpoint B)
    next_i32(n) x2           D      [A, B]      1
    advance_generator()      D      [A, B, D]   2     (checkpoint D)
    next_i32(n)              E      [A, B, D]   2
    reset_generator()        D      [A, B, D]   2     (undo draws since D)
    reverse_generator()      B      [A, B, D]   1
    advance_generator()      D      [A, B, D]   2     (replay, history kept)
    reset_generator(0)       A      [A, B, D]   0

advance_generator() only appends when it walks off the end of the history;
otherwise it replays the recorded seed, which makes advance/reverse
inverses of each other. Which seeds get recorded is entirely up to the
caller: draws between two checkpoints leave no trace.

xorshift can neither produce nor be seeded with zero, so a zero seed is
rejected. Not suitable for anything security related.
"""
import logging
import time
from typing import List, Optional, Sequence, TypeVar

from growing_maze.core.errors import BoundsError, ConstructionError, StateError

logger = logging.getLogger(__name__)

T = TypeVar('T')

MASK_64 = (1 << 64) - 1
MAX_63 = (1 << 63) - 1
MAX_31 = (1 << 31) - 1


class ReversibleRandom:
    __slots__ = ('_seed', '_history', '_index', '_on_record')

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = 0
            while seed == 0:
                seed = time.time_ns() & MASK_64
        if not isinstance(seed, int) or isinstance(seed, bool):
            raise ConstructionError(f"seed must be an integer, got {seed!r}")
        if seed == 0:
            raise ConstructionError("seed cannot be zero")
        if not 0 < seed <= MASK_64:
            raise ConstructionError(f"seed must fit in an unsigned 64-bit integer, got {seed}")
        self._seed = seed
        self._history: List[int] = [seed]
        self._index = 0
        self._on_record = True

    # --- Inspection ---

    @property
    def seed(self) -> int:
        """The current (possibly unrecorded) generator state."""
        return self._seed

    @property
    def initial_seed(self) -> int:
        return self._history[0]

    def get_seed(self, index: int) -> int:
        return self._history[index]

    @property
    def history(self) -> tuple:
        return tuple(self._history)

    @property
    def index(self) -> int:
        return self._index

    @property
    def in_initial_state(self) -> bool:
        return self._index == 0

    @property
    def in_latest_state(self) -> bool:
        return self._index == len(self._history) - 1

    @property
    def on_record(self) -> bool:
        """True while no number has been drawn since the last history call."""
        return self._on_record

    # --- History ---

    def advance_generator(self):
        self._index += 1
        if self._index >= len(self._history):
            self._history.append(self._seed)
        else:
            self._seed = self._history[self._index]
        self._on_record = True

    def reset_generator(self, index: Optional[int] = None):
        """
        Without an argument, drops every draw made since the last history
        call. With one, jumps to that recorded checkpoint.
        """
        if index is not None:
            if not 0 <= index < len(self._history):
                raise BoundsError(
                    f"history index {index} out of range [0, {len(self._history) - 1}]")
            if index != self._index:
                logger.debug(f"RNG jumping from checkpoint {self._index} to {index}")
            self._index = index
        self._seed = self._history[self._index]
        self._on_record = True

    def reverse_generator(self):
        if self._index == 0:
            raise StateError("cannot reverse the generator from its initial state")
        self._index -= 1
        self._seed = self._history[self._index]
        self._on_record = True

    # --- Generation ---

    def next_u64(self, n: Optional[int] = None) -> int:
        """
        Without `n`, the next raw 64-bit value. With `n`, a uniform integer in
        [0, n), rejecting the draws that would make the modulo biased.
        """
        if n is None:
            self._on_record = False
            seed = self._seed
            seed ^= (seed << 21) & MASK_64
            seed ^= seed >> 35
            seed ^= (seed << 4) & MASK_64
            self._seed = seed
            return seed
        if n <= 0 or n > MAX_63:
            raise ValueError(f"bound must be in [1, 2**63), got {n}")
        while True:
            bits = self.next_u64() & MAX_63
            value = bits % n
            if bits - value + n - 1 <= MAX_63:
                return value

    def next_i32(self, n: int) -> int:
        """Uniform integer in [0, n) drawn from the low 31 bits."""
        if n <= 0 or n > MAX_31:
            raise ValueError(f"bound must be in [1, 2**31), got {n}")
        while True:
            bits = self.next_u64() & MAX_31
            value = bits % n
            if bits - value + n - 1 <= MAX_31:
                return value

    def next_f64(self, low: Optional[float] = None, high: Optional[float] = None) -> float:
        """
        next_f64() -> [0, 1); next_f64(high) -> [0, high);
        next_f64(low, high) -> [low, high).
        """
        value = (self.next_u64() >> 11) * (1.0 / (1 << 53))
        if low is None:
            return value
        if high is None:
            return value * low
        return low + value * (high - low)

    def choose(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[self.next_i32(len(items))]

    def __eq__(self, other):
        if not isinstance(other, ReversibleRandom):
            return NotImplemented
        return (self._seed == other._seed
                and self._index == other._index
                and self._history == other._history)

    __hash__ = None

    def __repr__(self):
        return (f"ReversibleRandom(seed={self._seed}, history={self._history}, "
                f"index={self._index}, on_record={self._on_record})")
