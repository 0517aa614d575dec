import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def scripted_input():
    """Return a factory for read_line callables that replay given lines."""

    def make(lines):
        remaining = list(lines)

        def read_line(prompt):
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return read_line

    return make
