import pytest

from sunvale.components.colors import ColorPalette, ColorValue
from sunvale.solver import PlacementStep, cascade_carry, find_solution, format_solution


def full_inventory(count=10):
    return {int(color): count for color in ColorValue}


def only(*colors, count=1):
    """Inventory where just the given colors are available."""
    inventory = {int(color): 0 for color in ColorValue}
    for color in colors:
        inventory[int(color)] = count
    return inventory


# cascade_carry -----------------------------------------------------------

def test_cascade_carry_adds_to_previous_slot():
    board = [3, 5]
    cascade_carry(board, 0, 1)
    assert board == [4, 5]


def test_cascade_carry_wraps_past_maximum():
    board = [8]
    cascade_carry(board, 0, 1)
    assert board == [1]


def test_cascade_carry_off_left_edge_is_noop():
    board = [3]
    cascade_carry(board, -1, 1)
    assert board == [3]


def test_cascade_carry_zero_is_noop():
    board = [8]
    cascade_carry(board, 0, 0)
    assert board == [8]


# find_solution -----------------------------------------------------------

def test_single_slot_red_to_green_uses_yellow():
    steps = find_solution(ColorValue.GREEN, [ColorValue.RED], full_inventory())
    assert steps == [PlacementStep(slot=1, color=ColorValue.YELLOW)]


def test_all_slots_already_on_target_needs_nothing():
    assert find_solution(8, [8, 8], full_inventory()) == []


def test_every_slot_matching_target_returns_empty():
    assert find_solution(ColorValue.BLUE, [5, 5, 5, 5], full_inventory()) == []


def test_matching_slots_are_skipped():
    steps = find_solution(4, [4, 1, 4], full_inventory())
    assert steps == [PlacementStep(slot=2, color=ColorValue.YELLOW)]
    assert all(step.slot != 1 and step.slot != 3 for step in steps)


def test_overflow_wraps_and_carries_into_previous_slot():
    # Slot 2: 8 + Red(1) = 9 -> wraps to 1 and carries. Slot 1 becomes 3 + 1 = 4,
    # then 4 + Blue(5) = 9 -> wraps to 1.
    steps = find_solution(1, [3, 8], full_inventory())
    assert steps == [
        PlacementStep(slot=2, color=ColorValue.RED),
        PlacementStep(slot=1, color=ColorValue.BLUE),
    ]


def test_carry_can_resolve_previous_slot():
    # 8 + Orange(2) = 10 -> 2 with carry; slot 1 goes from 1 to 2 and already matches.
    steps = find_solution(2, [1, 8], full_inventory())
    assert steps == [PlacementStep(slot=2, color=ColorValue.ORANGE)]


def test_reaching_exactly_eight_carries_without_wrapping():
    # 5 + Yellow(3) = 8 exactly: value stays 8 but slot 1 still gets the carry (2 -> 3).
    steps = find_solution(8, [2, 5], full_inventory())
    assert steps == [
        PlacementStep(slot=2, color=ColorValue.YELLOW),
        PlacementStep(slot=1, color=ColorValue.BLUE),
    ]


def test_unreachable_target_returns_empty():
    # Only Red is available: 1 + 1 = 2 never reaches Yellow.
    assert find_solution(ColorValue.YELLOW, [ColorValue.RED], only(ColorValue.RED)) == []


def test_carry_spoiling_first_slot_discards_partial_solution():
    # Only Red: 7 + 1 = 8 carries into slot 1 (1 -> 2), which can then only reach 3.
    assert find_solution(8, [1, 7], only(ColorValue.RED)) == []


def test_zero_count_colors_are_not_used():
    inventory = only(ColorValue.ORANGE, count=5)
    steps = find_solution(3, [1], inventory)
    assert steps == [PlacementStep(slot=1, color=ColorValue.ORANGE)]


def test_inventory_is_never_depleted():
    inventory = only(ColorValue.YELLOW, count=1)
    steps = find_solution(4, [1, 1], inventory)
    assert steps == [
        PlacementStep(slot=2, color=ColorValue.YELLOW),
        PlacementStep(slot=1, color=ColorValue.YELLOW),
    ]
    assert inventory[int(ColorValue.YELLOW)] == 1


def test_out_of_range_inventory_keys_are_ignored():
    inventory = {0: 5, 9: 5, 3: 1}
    assert find_solution(4, [1], inventory) == [PlacementStep(slot=1, color=ColorValue.YELLOW)]
    assert find_solution(2, [1], {0: 5, 9: 5}) == []


def test_empty_board_has_no_solution():
    assert find_solution(1, [], full_inventory()) == []


def test_caller_state_is_not_mutated():
    slots = [3, 8, 1]
    inventory = full_inventory()
    find_solution(6, slots, inventory)
    assert slots == [3, 8, 1]
    assert inventory == full_inventory()


@pytest.mark.parametrize("target", list(ColorValue))
def test_solver_is_deterministic(target):
    slots = [7, 2, 8, 4]
    first = find_solution(target, slots, full_inventory())
    second = find_solution(target, slots, full_inventory())
    assert first == second


@pytest.mark.parametrize("target", list(ColorValue))
def test_full_inventory_always_lands_on_target(target):
    slots = [2, 6, 8, 3, 1]
    steps = find_solution(target, slots, full_inventory())
    board = list(slots)
    for step in steps:
        index = step.slot - 1
        new_value = board[index] + step.color
        carry = 1 if new_value >= 8 else 0
        if new_value > 8:
            new_value -= 8
        board[index] = new_value
        cascade_carry(board, index - 1, carry)
    assert board[0] == target


def test_format_solution_uses_color_names():
    steps = [PlacementStep(slot=2, color=ColorValue.RED), PlacementStep(slot=1, color=ColorValue.BLUE)]
    assert format_solution(steps, ColorPalette()) == ["Slot 2: Red", "Slot 1: Blue"]
    assert format_solution(steps) == ["Slot 2: Red", "Slot 1: Blue"]
