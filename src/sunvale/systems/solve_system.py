from __future__ import annotations

import logging

from esper import World

from sunvale.events.bus import EVENT_SOLUTION_READY, EVENT_SOLVE_REQUEST, EventBus
from sunvale.solver import find_solution, format_solution
from sunvale.utils.lookup import (
    get_inventory,
    get_palette,
    get_puzzle_state,
    get_solution_state,
)

logger = logging.getLogger(__name__)


class SolveSystem:
    """Runs the solver on demand and stores the result for the results panel."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SOLVE_REQUEST, self.on_solve_request)

    def on_solve_request(self, sender, **kwargs):
        state = get_puzzle_state(self.world)
        inventory = get_inventory(self.world)
        solution = get_solution_state(self.world)
        if state is None or inventory is None or solution is None:
            return
        palette = get_palette(self.world)
        steps = find_solution(
            palette.value_of(state.target),
            [palette.value_of(name) for name in state.slots],
            inventory.counts,
        )
        solution.steps = steps
        solution.lines = format_solution(steps, palette)
        solution.has_solved = True
        logger.info(
            "Solve target=%s slots=%s -> %s",
            state.target,
            state.slots,
            solution.lines or "no solution",
        )
        # No steps leaves the board untouched, so success then means slot 0 already matched.
        self.event_bus.emit(
            EVENT_SOLUTION_READY,
            steps=list(steps),
            lines=list(solution.lines),
            solved=bool(steps) or state.slots[0] == state.target,
        )
