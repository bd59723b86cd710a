"""
Example: Positional vs. name-keyed access.

A 2x3x4 tensor on legs Up, Down, Left filled with a counter.
"""

import itertools

import numpy as np
from tat import Tensor, leg_from_name, zip_to_new


def main():
    Up = leg_from_name("Up")
    Down = leg_from_name("Down")
    Left = leg_from_name("Left")

    t = Tensor([2, 3, 4], [Up, Down, Left])
    counter = itertools.count()
    t.generate(lambda: next(counter))

    print(repr(t))
    print(t)

    # Same slot, two addressing schemes
    print(f"\nt[1, 2, 3]                   = {t[1, 2, 3]}")
    print(f"t[{{Up: 1, Down: 2, Left: 3}}] = {t[{Up: 1, Down: 2, Left: 3}]}")

    # Elementwise transforms
    squared = t.map_to_new(lambda x: x * x)
    diff = zip_to_new(lambda a, b: b - a, t, squared)
    print(f"\nmax(t^2 - t) = {diff.data.max()}")

    # Verify against numpy
    print("\n--- Verification against numpy ---")
    ref = np.arange(24.0).reshape(2, 3, 4)
    print(f"Match: {np.allclose(t.to_numpy(), ref)}")


if __name__ == "__main__":
    main()
