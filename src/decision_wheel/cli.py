from __future__ import annotations

import argparse
import logging
import sys

from .core.errors import InputClosedError
from .core.settings import MAX_ROTATIONS, MAX_SPIN_DELAY, MIN_ROTATIONS
from .engine_play import run_play

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _rotations(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from exc
    if not MIN_ROTATIONS <= value <= MAX_ROTATIONS:
        raise argparse.ArgumentTypeError(f"must be between {MIN_ROTATIONS} and {MAX_ROTATIONS}")
    return value


def _add_play_args(p: argparse.ArgumentParser) -> None:
    # If omitted, runs with a random seed. Pass an int to reproduce a spin.
    p.add_argument("--seed", type=int, default=None, help="RNG seed (random if omitted)")
    p.add_argument("--no-color", action="store_true", help="Disable colored output (default is colored)")
    p.add_argument(
        "--spin-delay",
        type=float,
        default=None,
        metavar="SECONDS",
        help=f"Total pause across the spin animation (0-{MAX_SPIN_DELAY:g}s)",
    )
    p.add_argument("--rotations", type=_rotations, default=None, help="Intermediate picks shown before the result")
    p.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING", help="Log level for stderr diagnostics")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="decision-wheel", description="Pick one of your options at random")
    _add_play_args(parser)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(level=args.log_level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        run_play(
            seed=args.seed,
            no_color=args.no_color,
            spin_delay=args.spin_delay,
            rotations=args.rotations,
        )
    except InputClosedError as exc:
        logging.getLogger(__name__).debug("%s", exc)
        print("\nInput closed before all options were entered.", file=sys.stderr)
        raise SystemExit(1) from None
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        raise SystemExit(130) from None


if __name__ == "__main__":
    main()
