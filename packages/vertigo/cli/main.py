"""Command-line interface for Vertigo.

Prints curve and timeline previews for interpolator configurations.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from vertigo.core.config.loader import load_interpolator_config
from vertigo.core.interpolation import (
    DEFAULT_STRENGTH,
    Curvature,
    Direction,
    Interpolator,
    InterpolatorConfig,
    InvalidArgumentError,
    RepeatMode,
    sample_curve,
    simulate,
)
from vertigo.core.interpolation.errors import describe_validation_error
from vertigo.core.utils.logging import configure_logging, get_logger

console = Console()

_DEFAULT_SIMULATION: dict[str, Any] = {
    "direction": Direction.INCREMENTAL,
    "curvature": Curvature.CONCAVE,
    "interval": 1.0,
    "strength": DEFAULT_STRENGTH,
    "repeat_mode": RepeatMode.NO_REPEAT,
}


def _resolve_simulation_config(args: argparse.Namespace) -> InterpolatorConfig:
    """Merge config file values (if any) with explicit command-line overrides.

    Raises:
        InvalidArgumentError: If the merged values are not a valid configuration.
    """
    if args.config:
        values = load_interpolator_config(Path(args.config).resolve()).model_dump()
    else:
        values = dict(_DEFAULT_SIMULATION)

    overrides = {
        "direction": args.direction,
        "curvature": args.curvature,
        "interval": args.interval,
        "strength": args.strength,
        "repeat_mode": args.repeat,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return InterpolatorConfig.model_validate(values)
    except ValidationError as e:
        raise InvalidArgumentError(describe_validation_error(e)) from e


def run_curve(args: argparse.Namespace) -> int:
    """Print a sampled curve table."""
    try:
        points = sample_curve(Curvature(args.curvature), args.strength, args.samples)
    except ValueError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    table = Table(title=f"{args.curvature.capitalize()} curve (strength={args.strength:g})")
    table.add_column("t", style="cyan", justify="right")
    table.add_column("value", style="green", justify="right")
    for p in points:
        table.add_row(f"{p.t:.4f}", f"{p.v:.4f}")

    console.print(table)
    return 0


def run_simulate(args: argparse.Namespace) -> int:
    """Step an interpolator with a fixed delta and print each state."""
    try:
        config = _resolve_simulation_config(args)
        interpolator = Interpolator.from_config(config)
        states = simulate(interpolator, args.delta, args.steps)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    log = get_logger(__name__, command="simulate", config=args.config)
    log.info("Simulated %d steps of %.4fs with %s", args.steps, args.delta, interpolator)

    table = Table(
        title=(
            f"{config.curvature.value} / {config.repeat_mode.value} "
            f"(interval={config.interval:g}s, delta={args.delta:g}s)"
        )
    )
    table.add_column("step", style="cyan", justify="right")
    table.add_column("time", style="white", justify="right")
    table.add_column("raw", style="yellow", justify="right")
    table.add_column("interpolated", style="green", justify="right")
    table.add_column("direction", style="magenta")
    for i, state in enumerate(states, start=1):
        table.add_row(
            str(i),
            f"{i * args.delta:.3f}",
            f"{state.raw_value:.4f}",
            f"{state.interpolated_value:.4f}",
            state.direction.value,
        )

    console.print(table)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="vertigo",
        description="Vertigo - concave/convex interpolation previews",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    p.add_argument(
        "--structured-logs",
        action="store_true",
        help="Emit logs as JSON lines",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    curve = sub.add_parser("curve", help="Print a sampled curve")
    curve.add_argument(
        "--curvature",
        choices=[c.value for c in Curvature],
        default=Curvature.CONCAVE.value,
        help="Curve family (default: concave)",
    )
    curve.add_argument(
        "--strength",
        type=float,
        default=DEFAULT_STRENGTH,
        help=f"Curve strength, must be > 1 (default: {DEFAULT_STRENGTH:g})",
    )
    curve.add_argument("--samples", type=int, default=11, help="Number of samples (default: 11)")

    sim = sub.add_parser("simulate", help="Step an interpolator with a fixed delta")
    sim.add_argument("--config", help="Path to interpolator config (.json/.yaml)")
    sim.add_argument("--direction", choices=[d.value for d in Direction])
    sim.add_argument("--curvature", choices=[c.value for c in Curvature])
    sim.add_argument("--interval", type=float, help="Seconds to traverse 0..1")
    sim.add_argument("--strength", type=float, help="Curve strength, must be > 1")
    sim.add_argument("--repeat", choices=[r.value for r in RepeatMode], help="Repeat mode")
    sim.add_argument("--delta", type=float, default=1 / 30, help="Seconds per step (default: 1/30)")
    sim.add_argument("--steps", type=int, default=30, help="Number of steps (default: 30)")

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    configure_logging(level=args.log_level, structured=args.structured_logs)

    if args.cmd == "curve":
        sys.exit(run_curve(args))
    elif args.cmd == "simulate":
        sys.exit(run_simulate(args))


if __name__ == "__main__":
    main()
