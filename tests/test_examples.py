import sys
from pathlib import Path
from unittest.mock import patch

# Setup path to import examples
EXAMPLES_DIR = Path(__file__).parent.parent / "examples"
sys.path.append(str(EXAMPLES_DIR))

import int_bound
import reverse_twice
import short_lists


def test_int_bound_main(capsys):
    argv = ["int_bound.py", "0"]

    with patch.object(sys, "argv", argv):
        found = int_bound.main()

    assert found.names == [("x", 1000)]
    assert "x = 1000" in capsys.readouterr().out


def test_reverse_twice_main(capsys):
    argv = ["reverse_twice.py", "0"]

    with patch.object(sys, "argv", argv):
        results = reverse_twice.main()

    assert all(found is None for found in results.values())
    assert ": ok" in capsys.readouterr().out


def test_short_lists_main(capsys):
    argv = ["short_lists.py", "0"]

    with patch.object(sys, "argv", argv):
        found = short_lists.main()

    assert found.names == [("xs", [0, 0, 0, 0])]
    assert "xs = [0, 0, 0, 0]" in capsys.readouterr().out
