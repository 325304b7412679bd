import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tour import TourSolver  # noqa: E402


@pytest.fixture
def solver():
    return TourSolver()


@pytest.fixture
def corner_tour(solver):
    """Tour started from the top-left corner, (1, 1) in 1-based terms."""
    return solver.solve((0, 0))


@pytest.fixture
def stuck_solver():
    """The only 8x8 start square where the heuristic gets stuck."""
    solver = TourSolver()
    solver.solve((2, 4))
    return solver
