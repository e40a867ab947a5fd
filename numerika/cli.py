"""Command-line front end for the worked examples."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

from numerika.integration import simpson
from numerika.linear_systems import gauss_seidel_steps
from numerika.roots import bisection_steps

_SYSTEM_A = [[10.0, 2.0, 1.0], [1.0, 10.0, 2.0], [1.0, 1.0, 10.0]]
_SYSTEM_B = [10.0, 12.0, 8.0]


def _cubic(x: float) -> float:
    return x * x * x - x - 1


def _integrand(x: float) -> float:
    return x * x * math.exp(x) / (4 * x * x + 7)


def _run_gauss_seidel(args: argparse.Namespace) -> int:
    print("Iter\tx\t\ty\t\tz")
    last = None
    for last in gauss_seidel_steps(_SYSTEM_A, _SYSTEM_B, args.tolerance):
        x, y, z = last.values
        print(f"{last.iteration}\t{x:.6f}\t{y:.6f}\t{z:.6f}")
    assert last is not None
    x, y, z = last.values
    print()
    print(f"Solution: x = {x:.6f}, y = {y:.6f} and z = {z:.6f}")
    return 0


def _run_bisection(args: argparse.Namespace) -> int:
    last = None
    for last in bisection_steps(_cubic, args.a, args.b, args.epsilon):
        print(
            f"Iteration: {last.iteration}\t x = {last.x:g}\t"
            f" f(x) = {last.fx:g}\t error = {last.error:g}"
        )
    assert last is not None
    print(f"Root: {last.x:g}")
    return 0


def _run_simpson(args: argparse.Namespace) -> int:
    print(f"{simpson(_integrand, args.a, args.b, args.n):.6f}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numerika", description="Numerical methods examples.")
    commands = parser.add_subparsers(dest="command", required=True)

    seidel = commands.add_parser(
        "gauss-seidel", help="solve 10x+2y+z=10, x+10y+2z=12, x+y+10z=8"
    )
    seidel.add_argument("tolerance", type=float)
    seidel.set_defaults(handler=_run_gauss_seidel)

    bisect = commands.add_parser("bisection", help="find a root of x^3 - x - 1 on [a, b]")
    bisect.add_argument("a", type=float)
    bisect.add_argument("b", type=float)
    bisect.add_argument("epsilon", type=float)
    bisect.set_defaults(handler=_run_bisection)

    simp = commands.add_parser("simpson", help="integrate x^2 e^x / (4x^2 + 7) over [a, b]")
    simp.add_argument("a", type=float)
    simp.add_argument("b", type=float)
    simp.add_argument("n", type=int)
    simp.set_defaults(handler=_run_simpson)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a subcommand and return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())