"""
These E2E tests run each script under examples/ in a fresh interpreter and check its stdout.

A fresh process matters here: registrations live in the process-wide registry, and each example
has to work from a clean one, exactly as it would for a user copying it.
"""

import os
import subprocess
import sys
from pathlib import Path

os.chdir(Path(__file__).parents[2])

# HELPERS #####################


def path_to_pymodule(p: Path) -> str:
    return str(p).replace(os.path.sep, '.')[:-3]


def run_example_test(example: str, timeout: int = 60) -> str:
    module = path_to_pymodule(next(Path(f'examples/{example}/').glob('*.py')))
    output = subprocess.run(  # noqa: S603 (make sure repository is arranged such that this command is safe to run)
        [sys.executable, '-m', module],
        check=True,
        capture_output=True,
        text=True,
        timeout=timeout,
    )
    assert output.returncode == 0
    return output.stdout


# TESTS ######################


def test_example_1_listable():
    assert run_example_test('1_listable') == "[1, 2, 3]\n[('a', 1), ('b', 2), ('c', 3)]\n"


def test_example_2_multiple_capabilities():
    assert run_example_test('2_multiple_capabilities') == '[1, 2, 3]\nArrayObj(1, 2, 3)\n'


def test_example_3_drawable():
    assert run_example_test('3_drawable') == 'rect(1, 2, 11, 12)\narc(0, 0, 5, 0, 6.28)\n'


def test_example_4_existing_types():
    assert run_example_test('4_existing_types') == "[1, 2, 3]\n['1', '2', '3']\n"
