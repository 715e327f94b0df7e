"""
The Growing Tree maze generator, runnable forwards and backwards.

1. Start with every wall present.
2. Let C (the frontier) hold one random cell, the root.
3. Pick a cell from C with the selector. If it has neighbours that have never
   been in C, carve to one of them at random and add it to C; otherwise
   retire the cell from C.
4. Repeat 3 until C is empty.

Once every cell has been in C, step 3 can only retire cells, so generation
skips straight to placing the entrance and exit. Those go on the two edge
cells found by a double breadth-first sweep (origin -> farthest edge cell ->
farthest edge cell from that), the tree-diameter trick restricted to the
boundary.

Every step is undoable. The rng is checkpointed at the start of each growth
step; reversing a step rewinds to that checkpoint, replays the selector when
it needs to know where a retired cell came from, then steps the checkpoint
back. Root placement draws happen before the first checkpoint, so a reset
never has to redraw them.
"""
import logging
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from growing_maze.algo.base import ReversibleGenerator
from growing_maze.algo.selectors import Selector, default_algorithm, select
from growing_maze.algo.solvers import FarthestEdgeSearch, TreeWalker
from growing_maze.core.coordinate import Coordinate, Face
from growing_maze.core.direction import Direction, get_all_directions
from growing_maze.core.errors import ConstructionError, StateError
from growing_maze.core.grid import WallGrid
from growing_maze.core.rng import ReversibleRandom

logger = logging.getLogger(__name__)


class State(Enum):
    PLACE_ROOT = "placing root"
    GROW_TREE = "growing tree"
    PLACE_ENTRANCE_AND_EXIT = "placing entrance and exit"
    FINISHED = "finished"


class GrowingTreeGenerator(ReversibleGenerator):
    def __init__(self, shape: Sequence[int], selector: Optional[Selector] = None, seed: Optional[int] = None):
        self._grid = WallGrid(shape, all_walls=True)
        if self._grid.size == 1:
            raise ConstructionError("maze must have more than one cell")
        self.selector = selector if selector is not None else default_algorithm()
        self.rng = ReversibleRandom(seed)

        self.root = Coordinate(self.rng.next_i32(side) for side in self._grid.shape)
        self.entrance: Optional[Coordinate] = None
        self.exit: Optional[Coordinate] = None

        # C in the algorithm. Grows at the tail, shrinks anywhere.
        self._frontier: List[Coordinate] = []
        # True for every cell that is or has ever been in the frontier
        self._visited = np.zeros(self._grid.shape, dtype=bool)
        # Cells retired from the frontier, in retirement order
        self._completed: List[Coordinate] = []
        # One entry per growth step: the direction carved, or None if the step retired a cell
        self._path_log: List[Optional[Direction]] = []
        self.remaining_unvisited = self._grid.size
        self._state = State.PLACE_ROOT
        self._solution: Optional[List[Coordinate]] = None
        self._solution_cells: Optional[set] = None

        logger.debug(f"Growing tree over {self._grid.shape} from root {self.root} "
                     f"(seed={self.rng.initial_seed})")

    # --- Read-only views for renderers and tests ---

    @property
    def shape(self):
        return self._grid.shape

    @property
    def dimension_count(self) -> int:
        return self._grid.dimension_count

    @property
    def size(self) -> int:
        return self._grid.size

    def has_wall(self, face: Face) -> bool:
        return self._grid.has_wall(face)

    def grid_snapshot(self) -> WallGrid:
        return self._grid.copy()

    @property
    def state(self) -> State:
        return self._state

    @property
    def state_description(self) -> str:
        return self._state.value

    @property
    def is_finished(self) -> bool:
        return self._state is State.FINISHED

    @property
    def frontier(self) -> tuple:
        return tuple(self._frontier)

    @property
    def completed(self) -> tuple:
        return tuple(self._completed)

    @property
    def path_log(self) -> tuple:
        return tuple(self._path_log)

    def is_visited(self, coordinate: Coordinate) -> bool:
        return bool(self._visited[tuple(coordinate)])

    # --- Stepping ---

    def _set_state(self, state: State):
        if state is not self._state:
            logger.debug(f"State {self._state.name} -> {state.name}")
        self._state = state

    def advance_step(self):
        state = self._state
        if state is State.PLACE_ROOT:
            self._frontier.append(self.root)
            self._visited[tuple(self.root)] = True
            self.remaining_unvisited -= 1
            self._set_state(State.GROW_TREE)
        elif state is State.GROW_TREE:
            self._grow()
        elif state is State.PLACE_ENTRANCE_AND_EXIT:
            self._place_entrance_and_exit()
            self._set_state(State.FINISHED)
        elif state is State.FINISHED:
            pass
        else:
            raise AssertionError(f"Unhandled state {state}")

    def _grow(self):
        self.rng.advance_generator()
        cell_index = select(self.selector, len(self._frontier), self.rng)
        cell = self._frontier[cell_index]

        candidates = []
        for direction in get_all_directions(self.dimension_count):
            neighbor = cell.offset(direction)
            if self._grid.contains(neighbor) and not self._visited[tuple(neighbor)]:
                candidates.append((neighbor, direction))

        if candidates:
            neighbor, direction = self.rng.choose(candidates)
            self._grid.remove_wall(Face(cell, direction))
            self._visited[tuple(neighbor)] = True
            self._frontier.append(neighbor)
            self.remaining_unvisited -= 1
            self._path_log.append(direction)
        else:
            # order matters to the selector, so shift rather than swap
            self._frontier.pop(cell_index)
            self._completed.append(cell)
            self._path_log.append(None)

        # Every cell has been in C; only retirements are left
        if self.remaining_unvisited == 0:
            self._set_state(State.PLACE_ENTRANCE_AND_EXIT)

    def _place_entrance_and_exit(self):
        search = FarthestEdgeSearch(self._grid)
        self.entrance = search.run(Coordinate.origin(self.dimension_count))
        self.exit = search.run(self.entrance)
        if self.entrance is None or self.exit is None:
            raise AssertionError("no edge cell reachable in a connected maze")
        # The only step that changes two walls at once
        self._grid.remove_wall(self._grid.external_face(self.entrance))
        self._grid.remove_wall(self._grid.external_face(self.exit))
        logger.debug(f"Entrance {self.entrance}, exit {self.exit}")

    def reverse_step(self):
        state = self._state
        self._solution = None
        self._solution_cells = None
        if state is State.FINISHED:
            self._grid.add_wall(self._grid.external_face(self.entrance))
            self._grid.add_wall(self._grid.external_face(self.exit))
            self.entrance = None
            self.exit = None
            self._set_state(State.PLACE_ENTRANCE_AND_EXIT)
        elif state is State.PLACE_ENTRANCE_AND_EXIT or state is State.GROW_TREE:
            if self._path_log:
                self._ungrow()
                self._set_state(State.GROW_TREE)
            else:
                root = self._frontier.pop(0)
                self._visited[tuple(root)] = False
                self.remaining_unvisited += 1
                self._set_state(State.PLACE_ROOT)
        elif state is State.PLACE_ROOT:
            pass
        else:
            raise AssertionError(f"Unhandled state {state}")

    def _ungrow(self):
        # Back to the checkpoint taken when this step began
        self.rng.reset_generator()
        direction = self._path_log.pop()
        if direction is not None:
            # Carved cells are appended, and later steps are already undone,
            # so the carved cell is still at the tail.
            neighbor = self._frontier.pop()
            self._grid.add_wall(Face(neighbor, direction.invert()))
            self._visited[tuple(neighbor)] = False
            self.remaining_unvisited += 1
        else:
            # Replaying the selector on the pre-step size recovers the index
            # the retired cell was taken from.
            cell_index = select(self.selector, len(self._frontier) + 1, self.rng)
            self._frontier.insert(cell_index, self._completed.pop())
        self.rng.reverse_generator()

    def reset(self):
        # history[0] precedes the root draws. Until a growth step records a
        # checkpoint, the current seed is the one growth must start from.
        if len(self.rng.history) > 1:
            self.rng.reset_generator(0)
        self.entrance = None
        self.exit = None
        self._frontier.clear()
        self._visited.fill(False)
        self._completed.clear()
        self._path_log.clear()
        self._grid.reset_walls(True)
        self.remaining_unvisited = self._grid.size
        self._solution = None
        self._solution_cells = None
        self._set_state(State.PLACE_ROOT)

    # --- Solution ---

    def solution(self) -> List[Coordinate]:
        """
        The unique route through the finished maze, from the cell just outside
        the entrance to the cell just outside the exit.
        """
        if self._state is not State.FINISHED:
            raise StateError("cannot solve an unfinished maze")
        if self._solution is None:
            start = self.entrance.offset(self._grid.external_face(self.entrance).side)
            goal = self.exit.offset(self._grid.external_face(self.exit).side)
            path = TreeWalker(self._grid).run_all(start, goal)
            if not path:
                raise AssertionError(f"no route from {start} to {goal} in a perfect maze")
            self._solution = path
            self._solution_cells = set(path)
        return list(self._solution)

    def is_on_solution(self, coordinate: Sequence[int]) -> bool:
        if self._solution_cells is None:
            self.solution()
        return Coordinate(coordinate) in self._solution_cells

    def __repr__(self):
        return (f"GrowingTreeGenerator(shape={self._grid.shape}, "
                f"state={self._state.name}, seed={self.rng.initial_seed})")
