#!/usr/bin/env python

"""Check that reversing a list twice gives the list back"""

import sys
from functools import partial

import bytesift

registry = bytesift.PropertyRegistry()


@registry.register(partial(bytesift.sequences, item=bytesift.integers))
def reverse_twice(xs):
    assert list(reversed(list(reversed(xs)))) == xs


def main():
    if len(sys.argv) > 1:
        reverse_twice.property_test.settings = bytesift.Settings(seed=int(sys.argv[1]))
    results = registry.run_all()
    for name, found in results.items():
        print(f"{name}: {'ok' if found is None else found.describe()}")
    return results


if __name__ == "__main__":
    outcome = main()
    sys.exit(0 if all(v is None for v in outcome.values()) else 1)
