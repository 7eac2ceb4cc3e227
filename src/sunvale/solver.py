"""Greedy solver for the Sun Vale color puzzle.

Placing a piece adds its value to a slot. Sums that reach the maximum value
carry one unit into the slot on the left; sums past the maximum also wrap
back to the start of the range. Slots are resolved right to left in a single
pass, so the search never backtracks and some solvable setups are reported
as unsolvable.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, MutableSequence, Sequence

from sunvale.components.colors import ColorValue
from sunvale.constants import MAX_COLOR_VALUE, MIN_COLOR_VALUE

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlacementStep:
    """One piece placement. ``slot`` is 1-based, matching the slot labels."""
    slot: int
    color: ColorValue


def cascade_carry(board: MutableSequence[int], index: int, carry: int) -> None:
    """Add ``carry`` to ``board[index]`` in place, wrapping past the maximum.

    Carrying off the left edge of the board is a no-op.
    """
    if carry == 0 or index < 0:
        return
    board[index] += carry
    if board[index] > MAX_COLOR_VALUE:
        board[index] -= MAX_COLOR_VALUE


def _add_piece(current: int, piece: int) -> tuple[int, int]:
    new_value = current + piece
    carry = 0
    if new_value > MAX_COLOR_VALUE:
        carry = 1
        new_value -= MAX_COLOR_VALUE
    elif new_value == MAX_COLOR_VALUE:
        carry = 1
    return new_value, carry


def find_solution(
    target: int,
    slots: Sequence[int],
    inventory: Mapping[int, int],
) -> List[PlacementStep]:
    """Return the placements that turn the first slot into ``target``.

    An empty list means the greedy pass did not land on the target (or that
    every slot already matched). Inventory counts only decide which colors
    are available; they are never decremented. Neither ``slots`` nor
    ``inventory`` is modified.
    """
    board = [int(value) for value in slots]
    if not board:
        return []
    target = int(target)
    candidates = [
        int(value) for value in sorted(inventory)
        if MIN_COLOR_VALUE <= int(value) <= MAX_COLOR_VALUE
    ]
    solution: List[PlacementStep] = []

    for i in range(len(board) - 1, -1, -1):
        current = board[i]
        if current == target:
            continue
        for color_value in candidates:
            if inventory[color_value] <= 0:
                continue
            new_value, carry = _add_piece(current, color_value)
            if new_value == target:
                solution.append(PlacementStep(slot=i + 1, color=ColorValue(color_value)))
                board[i] = new_value
                cascade_carry(board, i - 1, carry)
                break

    if board[0] != target:
        logger.debug("No solution: first slot ended at %s, target %s", board[0], target)
        return []
    logger.debug("Solved in %d step(s): %s", len(solution), solution)
    return solution


def format_solution(steps: Sequence[PlacementStep], palette=None) -> List[str]:
    """Render steps as ``"Slot N: ColorName"`` lines for the results panel."""
    lines: List[str] = []
    for step in steps:
        if palette is not None:
            name = palette.name_of(step.color)
        else:
            name = ColorValue(step.color).display_name
        lines.append(f"Slot {step.slot}: {name}")
    return lines
