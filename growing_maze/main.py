import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'growing_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from growing_maze import config


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def non_negative_int(value: str) -> int:
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {count}")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Growing Maze: reversible N-dimensional maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--shape", type=int, nargs="+", default=list(config.DEFAULT_SHAPE),
                            help="Side lengths, one per dimension")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed (non-zero)")
    gen_parser.add_argument("--algo", type=str, default=config.DEFAULT_ALGO, choices=config.ALGO_CHOICES,
                            help="Frontier selection algorithm")
    gen_parser.add_argument("--prim-chance", type=float, default=config.DEFAULT_PRIM_CHANCE,
                            help="Chance of a random pick for the default algorithm (0.0 - 1.0)")
    gen_parser.add_argument("--steps", type=non_negative_int, default=None, help="Advance this many steps instead of finishing")
    gen_parser.add_argument("--solve", action="store_true", help="Print the solution path")
    gen_parser.add_argument("--check-reverse", action="store_true",
                            help="Rewind to the start and regenerate, checking the result is identical")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Run performance suite")
    bench_parser.add_argument("--size", type=int, default=config.BENCHMARK_SIZE,
                              help="Side length of the 2D benchmark maze; other dimensions keep the cell count")
    bench_parser.add_argument("--dims", type=int, nargs="+", default=list(config.BENCHMARK_DIMENSIONS),
                              help="Dimension counts to benchmark")
    return parser


def generate(args, logger) -> int:
    from growing_maze.algo.growing_tree import GrowingTreeGenerator, State
    from growing_maze.algo.selectors import from_name
    from growing_maze.core.complexity import MazeAnalyzer

    shape_str = "x".join(str(s) for s in args.shape)
    logger.info(f"Generating {shape_str} maze with {args.algo.upper()}...")

    selector = from_name(args.algo, args.prim_chance)
    maze = GrowingTreeGenerator(args.shape, selector=selector, seed=args.seed)
    logger.info(f"Seed: {maze.rng.initial_seed}, root: {maze.root}")

    t0 = time.time()
    if args.steps is None:
        maze.finish()
    else:
        maze.advance(args.steps)
    logger.info(f"Generation stopped in state '{maze.state_description}' after {time.time() - t0:.4f}s")

    steps_taken = len(maze.path_log)
    print(f"State:     {maze.state_description}")
    print(f"Steps:     {steps_taken} growth steps, {maze.remaining_unvisited} cells unvisited")

    if not maze.is_finished:
        return 0

    stats = MazeAnalyzer.calculate_stats(maze)
    print(f"Entrance:  {maze.entrance}")
    print(f"Exit:      {maze.exit}")
    print(f"Stats:     {stats}")

    if args.solve:
        path = maze.solution()
        print(f"Solution ({len(path)} cells): " + " ".join(str(c) for c in path))

    if args.check_reverse:
        logger.info("Rewinding to the initial state...")
        final = maze.grid_snapshot()
        total = 0
        while maze.state is not State.PLACE_ROOT:
            maze.reverse()
            total += 1
        logger.info(f"Reversed {total} steps, replaying...")
        maze.finish()
        if maze.grid_snapshot() != final:
            logger.error("Replayed maze differs from the original")
            return 1
        logger.info("Replay matches.")
    return 0


def benchmark(args, logger) -> int:
    from growing_maze.algo.growing_tree import GrowingTreeGenerator
    from growing_maze.algo.selectors import default_algorithm

    cells = args.size * args.size
    print(f"\n{'DIMS':<6} | {'SHAPE':<16} | {'FORWARD (s)':<12} | {'REVERSE (s)':<12} | {'STEPS':<8}")
    print("-" * 66)
    for dims in args.dims:
        side = max(2, round(cells ** (1.0 / dims)))
        shape = [side] * dims
        maze = GrowingTreeGenerator(shape, selector=default_algorithm(), seed=123)

        t0 = time.time()
        maze.finish()
        forward = time.time() - t0
        steps = len(maze.path_log) + 2

        t0 = time.time()
        maze.reverse(steps + 1)
        backward = time.time() - t0
        logger.debug(f"{dims}D maze rewound to '{maze.state_description}'")

        shape_str = "x".join(str(s) for s in shape)
        print(f"{dims:<6} | {shape_str:<16} | {forward:<12.4f} | {backward:<12.4f} | {steps:<8}")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("growing_maze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    from growing_maze.core.errors import MazeError
    try:
        if args.command == "generate":
            return generate(args, logger)
        elif args.command == "benchmark":
            return benchmark(args, logger)
    except MazeError as e:
        logger.error(str(e))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
