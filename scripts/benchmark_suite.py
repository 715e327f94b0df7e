import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from growing_maze.algo.growing_tree import GrowingTreeGenerator
from growing_maze.algo.selectors import default_algorithm, prim_algorithm, recursive_backtracker
from growing_maze.core.complexity import MazeAnalyzer


def benchmark_shape(shape, name, selector):
    cells = 1
    for side in shape:
        cells *= side
    print(f"\n--- Benchmarking {'x'.join(str(s) for s in shape)} ({cells:,} cells) with {name} ---")

    start_time = time.time()
    maze = GrowingTreeGenerator(shape, selector=selector, seed=42)
    print(f"Init: {time.time() - start_time:.4f}s")
    print(f"Memory (Wall Data): ~{maze.grid_snapshot().walls.nbytes / (1024 * 1024):.2f} MB")

    gen_start = time.time()
    maze.finish()
    gen_time = time.time() - gen_start
    steps = len(maze.path_log)
    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Speed: {cells / gen_time:,.0f} cells/sec ({steps:,} growth steps)")

    solve_start = time.time()
    path = maze.solution()
    print(f"Solution: {len(path)} cells in {time.time() - solve_start:.4f}s")

    stats = MazeAnalyzer.calculate_stats(maze)
    print(f"Dead Ends: {stats['dead_end_percent']:.1f}%")

    rev_start = time.time()
    maze.reverse(steps + 2)
    print(f"Full Rewind: {time.time() - rev_start:.4f}s (state: {maze.state_description})")


def run_suite():
    shapes = [
        (50, 50),
        (150, 150),
        (25, 25, 25),
        (9, 9, 9, 9),
    ]
    selectors = [
        ("Recursive Backtracker", recursive_backtracker()),
        ("Prim", prim_algorithm()),
        ("Default (50/50)", default_algorithm()),
    ]

    for shape in shapes:
        for name, selector in selectors:
            benchmark_shape(shape, name, selector)


if __name__ == "__main__":
    run_suite()
