#!/usr/bin/env python3
"""
TAT: named-leg dense tensors

Command-line front-end for building small tensors and inspecting the
leg catalog.

Usage:
    # Fill a tensor with a counter and print it through name-keyed access
    python main.py demo --dims 2,3,4 --legs Up,Down,Left

    # Read one element by leg name
    python main.py lookup --dims 2,3,4 --legs Up,Down,Left --at Up=1,Down=2,Left=3

    # List the conventional leg names
    python main.py legs --filter Right

    # Run tests
    python main.py test
"""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np

from tat import (
    Leg,
    LegRegistry,
    TATError,
    Tensor,
    default_registry,
    __version__,
)
from tat.utils.logging import setup_logging

logger = logging.getLogger("tat.cli")


def parse_dims_string(dims_str: str) -> Tuple[int, ...]:
    """Parse extents: '2,3,4'"""
    return tuple(int(part.strip()) for part in dims_str.split(",") if part.strip())


def parse_legs_string(legs_str: str, registry: LegRegistry) -> Tuple[Leg, ...]:
    """Parse leg names: 'Up,Down,Left'. Integers prefixed with '#' are direct ids: '#7'."""
    legs = []
    for part in legs_str.split(","):
        part = part.strip()
        if not part:
            continue
        if part.startswith("#"):
            legs.append(registry.leg_from_id(int(part[1:])))
        else:
            legs.append(registry.leg_from_name(part))
    return tuple(legs)


def parse_coords_string(coords_str: str, registry: LegRegistry) -> Dict[Leg, int]:
    """Parse a name-keyed coordinate: 'Up=1,Down=2,Left=3'"""
    coords = {}
    for part in coords_str.split(","):
        part = part.strip()
        if not part:
            continue
        name, value = part.split("=")
        coords[parse_legs_string(name, registry)[0]] = int(value.strip())
    return coords


def build_counter_tensor(dims: Tuple[int, ...], legs: Tuple[Leg, ...], dtype: str, start: int) -> Tensor:
    """Tensor filled with start, start+1, ... in flat index order."""
    t = Tensor(dims, legs, dtype=dtype)
    counter = itertools.count(start)
    t.generate(lambda: next(counter))
    return t


def format_by_legs(t: Tensor) -> str:
    """Render t by reading every element back through a Leg -> coordinate mapping."""
    readback = Tensor(t.dims, t.legs, dtype=t.dtype)
    for position, _ in t.items():
        readback[position] = t[dict(zip(t.legs, position))]
    return readback.format()


def cmd_demo(args, registry: LegRegistry) -> int:
    """Execute the demo command."""
    try:
        dims = parse_dims_string(args.dims)
        legs = parse_legs_string(args.legs, registry)
        t = build_counter_tensor(dims, legs, args.dtype, args.start)
    except (TATError, ValueError, TypeError) as e:
        print(f"Error: {e}")
        return 1

    print(repr(t))
    print(format_by_legs(t))
    return 0


def cmd_lookup(args, registry: LegRegistry) -> int:
    """Execute the lookup command."""
    try:
        dims = parse_dims_string(args.dims)
        legs = parse_legs_string(args.legs, registry)
        t = build_counter_tensor(dims, legs, args.dtype, args.start)
        coords = parse_coords_string(args.at, registry)
        position = t.position_of(coords)
        index = t.index_of(position)
    except (TATError, ValueError, TypeError) as e:
        print(f"Error: {e}")
        return 1

    print(f"position: {position}")
    print(f"flat index: {index}")
    print(f"value: {t.data[index]}")
    return 0


def cmd_legs(args, registry: LegRegistry) -> int:
    """List registered legs, optionally restricted to a name prefix."""
    for leg in registry:
        if args.filter and not str(leg).startswith(args.filter):
            continue
        print(f"{leg.id:4d} {leg}")
    return 0


def cmd_test(args, registry: Optional[LegRegistry] = None) -> int:
    """Execute the test command."""
    import subprocess

    test_dir = Path(__file__).parent / "tests"
    if not test_dir.exists():
        print(f"Test directory not found: {test_dir}")
        return 1

    cmd = [sys.executable, "-m", "pytest", str(test_dir)]
    if args.verbose:
        cmd.append("-v")
    if args.coverage:
        cmd.extend(["--cov=tat", "--cov-report=term-missing"])

    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def cmd_info(args, registry: LegRegistry) -> int:
    """Display system information."""
    print(f"TAT v{__version__}")
    print("Named-leg dense tensors")
    print()
    print(f"Registered legs: {len(registry)}")
    print()
    print("Python:", sys.version.split()[0])
    print("NumPy:", np.__version__)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tat",
        description="TAT: named-leg dense tensors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Counter-filled tensor read back by leg name
  tat demo --dims 2,3,4 --legs Up,Down,Left

  # Direct leg ids are written with a leading '#'
  tat demo --dims 2,2 --legs "#1000,#1001"

  # Single element lookup
  tat lookup --dims 2,3,4 --legs Up,Down,Left --at Up=1,Down=2,Left=3

  # Leg catalog
  tat legs --filter Phy
"""
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"TAT {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_tensor_args(p):
        p.add_argument("--dims", "-d", type=str, default="2,3,4", help="Extents: '2,3,4'")
        p.add_argument("--legs", "-l", type=str, default="Up,Down,Left", help="Leg names: 'Up,Down,Left'")
        p.add_argument("--dtype", type=str, default="float64", help="numpy element type (default: float64)")
        p.add_argument("--start", type=int, default=0, help="First counter value (default: 0)")

    demo_parser = subparsers.add_parser("demo", help="Print a counter-filled tensor")
    add_tensor_args(demo_parser)

    lookup_parser = subparsers.add_parser("lookup", help="Read one element by leg name")
    add_tensor_args(lookup_parser)
    lookup_parser.add_argument("--at", "-a", type=str, required=True, help="Coordinate: 'Up=1,Down=2'")

    legs_parser = subparsers.add_parser("legs", help="List registered legs")
    legs_parser.add_argument("--filter", "-f", type=str, default="", help="Name prefix")

    test_parser = subparsers.add_parser("test", help="Run test suite")
    test_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    test_parser.add_argument("--coverage", "-c", action="store_true", help="With coverage")

    subparsers.add_parser("info", help="Show system information")

    return parser


def main(argv: Optional[List[str]] = None, registry: Optional[LegRegistry] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    registry = registry if registry is not None else default_registry

    commands = {
        "demo": cmd_demo,
        "lookup": cmd_lookup,
        "legs": cmd_legs,
        "test": cmd_test,
        "info": cmd_info,
    }
    if args.command is None:
        parser.print_help()
        return 0
    logger.debug("running command %s", args.command)
    return commands[args.command](args, registry)


if __name__ == "__main__":
    sys.exit(main())
