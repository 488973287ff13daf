#!/usr/bin/env python3
from __future__ import annotations

import argparse
import hashlib
import json
import logging
import pathlib
import sys
from typing import Iterable, Iterator, TextIO

import numpy as np

from RouteTSP import ProblemSizeExceeded, RouteTSP, SolveConfig, settings

logger = logging.getLogger("benchmark_solvers")

DEFAULT_ALGORITHMS = ["exact", "heuristic", "metaheuristic"]


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark RouteTSP solvers on random point sets.")
    parser.add_argument(
        "--counts",
        nargs="+",
        type=int,
        default=[5, 8, 10, 15, 25, 50],
        help="Point counts to generate.",
    )
    parser.add_argument(
        "--instances-per-count",
        type=int,
        default=3,
        help="How many instances to generate per point count.",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=100.0,
        help="Coordinates drawn uniformly in [0, scale).",
    )
    parser.add_argument(
        "--algorithms",
        nargs="+",
        default=DEFAULT_ALGORITHMS,
        help="Algorithm or family names to run (default: exact heuristic metaheuristic).",
    )
    parser.add_argument("--seed", type=int, default=42, help="Seed for instances and annealing (default: 42).")
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=None,
        help="Destination JSONL file (default: stdout).",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level.")
    return parser.parse_args(raw_args)


def generate_instances(
    counts: Iterable[int], per_count: int, scale: float, rng: np.random.Generator
) -> Iterator[dict]:
    for count in counts:
        for _ in range(per_count):
            coordinates = rng.random((count, 2)) * scale
            yield {
                "problem_id": hashlib.sha1(coordinates.tobytes()).hexdigest(),
                "num_points": count,
                "coordinates": coordinates.tolist(),
            }


def run_benchmark(args: argparse.Namespace, out: TextIO) -> int:
    rng = np.random.default_rng(args.seed)
    pipeline = RouteTSP()
    runs = 0
    skipped = 0

    for problem in generate_instances(args.counts, args.instances_per_count, args.scale, rng):
        for algorithm in args.algorithms:
            config = SolveConfig(algorithm=algorithm, seed=args.seed)
            record = {
                "problem_id": problem["problem_id"],
                "num_points": problem["num_points"],
                "requested": algorithm,
            }
            try:
                result = pipeline.solve(problem["coordinates"], config=config)
            except ProblemSizeExceeded as exc:
                logger.info("%s skipped on %d points: %s", algorithm, problem["num_points"], exc)
                record.update({"status": "skipped", "reason": str(exc)})
                skipped += 1
            else:
                record.update(
                    {
                        "status": "complete",
                        "algorithm": result.algorithm_name,
                        "total_distance": result.total_distance,
                        "execution_time_ms": result.execution_time_ms,
                        "tour": list(result.tour),
                    }
                )
                runs += 1
            out.write(json.dumps(record))
            out.write("\n")

    logger.info("Completed %d runs, skipped %d.", runs, skipped)
    return 0


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.output is None:
        return run_benchmark(args, sys.stdout)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as fh:
        return run_benchmark(args, fh)


if __name__ == "__main__":
    raise SystemExit(main())
