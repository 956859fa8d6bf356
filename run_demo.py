#!/usr/bin/env python
import argparse
import logging
import time
from pathlib import Path

from core.cached_matrix import CachedMatrix
from core.exceptions import CacheMatrixError
from core.solve import cache_solve
from inout.demo_config import DemoConfig, load_demo_config
from utils.logging_config import setup_logging, get_logger
from utils.matrix import random_matrix

logger = get_logger(__name__)


def _timed_solves(label: str, cm: CachedMatrix, cfg: DemoConfig) -> None:
    for i in range(cfg.repeats):
        start = time.perf_counter()
        inv = cache_solve(cm, **cfg.solver.as_kwargs())
        elapsed = time.perf_counter() - start
        outcome = "rejected" if inv is None else f"inverse {inv.shape}"
        print(f"{label} call {i + 1}: {outcome} in {elapsed:.4f} s")


def run_demo(cfg: DemoConfig) -> None:
    """
    Walk a CachedMatrix through every cache state and time each query.

    Fresh matrix, sanctioned replacement, out-of-band corruption, then
    re-registration. The first query after each sanctioned write inverts;
    later ones are served from cache; queries after corruption are refused.
    """
    seed = cfg.seed

    def fresh():
        nonlocal seed
        M = random_matrix(cfg.size, seed=seed, dtype=cfg.dtype)
        if seed is not None:
            seed += 1
        return M

    cm = CachedMatrix(fresh())
    _timed_solves("initial", cm, cfg)

    cm.set_matrix(fresh())
    _timed_solves("after set_matrix", cm, cfg)

    cm.corrupt_matrix(fresh())
    _timed_solves("after corrupt_matrix", cm, cfg)

    cm.set_matrix(fresh())
    _timed_solves("after re-set", cm, cfg)


def main() -> None:
    """
    Demonstrate the speed-up of cached matrix inversion.

    Command-line arguments:
      --config: Optional YAML demo configuration.
      --size: Matrix order (overrides the config).
      --seed: RNG seed (overrides the config).
      --repeats: cache_solve calls per step (overrides the config).
      --log-file: Also write log output to this file.
      --verbose: Enable DEBUG logging.
    """
    parser = argparse.ArgumentParser(description="Time cached vs. fresh matrix inversion.")
    parser.add_argument("--config", type=Path, help="Path to a YAML demo configuration file.")
    parser.add_argument("--size", type=int, help="Matrix order.")
    parser.add_argument("--seed", type=int, help="Random seed.")
    parser.add_argument("--repeats", type=int, help="Number of cache_solve calls per step.")
    parser.add_argument("--log-file", help="Optional log file.", default=None)
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    args = parser.parse_args()

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        cfg = load_demo_config(args.config) if args.config else DemoConfig()
    except CacheMatrixError as e:
        logger.error("Configuration failed: %s", e)
        raise SystemExit(2)

    if args.size is not None:
        cfg.size = args.size
    if args.seed is not None:
        cfg.seed = args.seed
    if args.repeats is not None:
        cfg.repeats = args.repeats
    logger.debug("Demo configuration: %s", cfg)

    try:
        run_demo(cfg)
    except CacheMatrixError as e:
        logger.error("Demo failed: %s", e)
        raise SystemExit(1)
    print("Demo completed.")


if __name__ == "__main__":
    main()
