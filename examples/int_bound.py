#!/usr/bin/env python

"""Find the smallest integer that breaks an upper bound"""

import sys

import bytesift

bound = 1000


def below_bound(ctx):
    """Every integer is below the bound (it is not)."""
    x = bytesift.integers(ctx, name="x")
    ctx.check(x < bound, f"{x} >= {bound}")


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    found = bytesift.falsify(below_bound, bytesift.Settings(seed=seed))
    if found is None:
        print("No counterexample found")
    else:
        print(found.describe())
    return found


if __name__ == "__main__":
    if len(sys.argv) > 2:
        print(f"Usage: {sys.argv[0]} [seed]")
        sys.exit(1)
    sys.exit(0 if main() is None else 1)
