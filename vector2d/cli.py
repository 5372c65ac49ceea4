"""CLI runner evaluating a single vector operation."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from . import config, ops
from .math.vec2 import Vector2D

# operation name -> (operand count, evaluator)
OPERATIONS: dict[str, tuple[int, Callable[[list[float]], Vector2D | float]]] = {
    "add": (4, lambda n: ops.add(ops.new(n[0], n[1]), ops.new(n[2], n[3]))),
    "subtract": (4, lambda n: ops.subtract(ops.new(n[0], n[1]), ops.new(n[2], n[3]))),
    "dot": (4, lambda n: ops.dot(ops.new(n[0], n[1]), ops.new(n[2], n[3]))),
    "distance": (4, lambda n: ops.distance(ops.new(n[0], n[1]), ops.new(n[2], n[3]))),
    "multiply": (3, lambda n: ops.multiply(ops.new(n[0], n[1]), n[2])),
    "divide": (3, lambda n: ops.divide(ops.new(n[0], n[1]), n[2])),
    "rotate": (3, lambda n: ops.rotate(ops.new(n[0], n[1]), n[2])),
    "magnitude": (2, lambda n: ops.magnitude(ops.new(n[0], n[1]))),
    "normalize": (2, lambda n: ops.normalize(ops.new(n[0], n[1]))),
    "negate": (2, lambda n: ops.negate(ops.new(n[0], n[1]))),
    "from-angle": (1, lambda n: ops.from_angle(n[0])),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vector2d", description="Evaluate a 2D vector operation.")
    parser.add_argument("operation", choices=sorted(OPERATIONS), help="Operation to evaluate.")
    parser.add_argument(
        "numbers",
        type=float,
        nargs="*",
        help="Operands: vector components followed by a scalar or angle (degrees) where needed.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=config.DEFAULT_PRECISION,
        help="Digits after the decimal point in the printed result.",
    )
    return parser


def format_result(result: Vector2D | float, precision: int) -> str:
    if isinstance(result, Vector2D):
        return f"({round(result.x, precision)}, {round(result.y, precision)})"
    return str(round(result, precision))


def run(argv: Sequence[str] | None = None) -> str:
    parser = _build_parser()
    args = parser.parse_args(argv)

    arity, evaluate = OPERATIONS[args.operation]
    if len(args.numbers) != arity:
        parser.error(f"{args.operation} expects {arity} numbers, got {len(args.numbers)}")

    output = format_result(evaluate(args.numbers), args.precision)
    print(output)
    return output


def main() -> None:
    run()


if __name__ == "__main__":
    main()
