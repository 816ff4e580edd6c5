#!/usr/bin/env python

"""Shrink a list that is too long down to the shortest offender"""

import sys
from functools import partial

import bytesift

max_length = 3

unsigned = partial(bytesift.integers, signed=False)


def short(ctx):
    xs = bytesift.sequences(ctx, unsigned, name="xs")
    ctx.check(len(xs) <= max_length, f"length {len(xs)}")


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    found = bytesift.falsify(short, bytesift.Settings(seed=seed))
    print("No counterexample found" if found is None else found.describe())
    return found


if __name__ == "__main__":
    sys.exit(0 if main() is None else 1)
