from dataclasses import dataclass, field
from typing import List

from sunvale.solver import PlacementStep


@dataclass(slots=True)
class SolutionState:
    """Outcome of the most recent solve.

    has_solved stays False until the first solve so the view can show a
    placeholder; an empty ``steps`` after a solve means no solution was found.
    """
    steps: List[PlacementStep] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    has_solved: bool = False
