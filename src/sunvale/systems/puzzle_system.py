from __future__ import annotations

import logging

from esper import World

from sunvale.components.puzzle import Inventory, PuzzleState
from sunvale.constants import DEFAULT_SLOT_COLOR, MIN_SLOT_COUNT
from sunvale.events.bus import (
    EVENT_INVENTORY_SET,
    EVENT_PUZZLE_CHANGED,
    EVENT_PUZZLE_RANDOMIZE,
    EVENT_SLOT_ADD_REQUEST,
    EVENT_SLOT_COLOR_CYCLE,
    EVENT_SLOT_COLOR_SET,
    EVENT_SLOT_REMOVE_REQUEST,
    EVENT_TARGET_COLOR_CYCLE,
    EVENT_TARGET_COLOR_SET,
    EventBus,
)
from sunvale.utils.coerce import coerce_int, coerce_non_negative
from sunvale.utils.lookup import get_inventory, get_palette, get_puzzle_state

logger = logging.getLogger(__name__)


class PuzzleSystem:
    """Applies edits to the target, the slot row and the inventory.

    Logic:
      - Slots grow by appending the default color and shrink from the end,
        never below MIN_SLOT_COUNT.
      - Unknown colors and out-of-range slot indexes are ignored.
      - Inventory edits only apply while the inventory is editable; counts
        are clamped at zero and unparseable input counts as zero.
      - Every accepted change emits EVENT_PUZZLE_CHANGED.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SLOT_ADD_REQUEST, self.on_slot_add)
        self.event_bus.subscribe(EVENT_SLOT_REMOVE_REQUEST, self.on_slot_remove)
        self.event_bus.subscribe(EVENT_SLOT_COLOR_SET, self.on_slot_color_set)
        self.event_bus.subscribe(EVENT_SLOT_COLOR_CYCLE, self.on_slot_color_cycle)
        self.event_bus.subscribe(EVENT_TARGET_COLOR_SET, self.on_target_color_set)
        self.event_bus.subscribe(EVENT_TARGET_COLOR_CYCLE, self.on_target_color_cycle)
        self.event_bus.subscribe(EVENT_INVENTORY_SET, self.on_inventory_set)
        self.event_bus.subscribe(EVENT_PUZZLE_RANDOMIZE, self.on_randomize)

    # Slot row -----------------------------------------------------------

    def on_slot_add(self, sender, **kwargs):
        state = get_puzzle_state(self.world)
        if state is None:
            return
        color = kwargs.get('color') or DEFAULT_SLOT_COLOR
        if not get_palette(self.world).is_known(color):
            return
        state.slots.append(color)
        self._emit_changed(state, reason='slot_added')

    def on_slot_remove(self, sender, **kwargs):
        state = get_puzzle_state(self.world)
        if state is None or len(state.slots) <= MIN_SLOT_COUNT:
            return
        state.slots.pop()
        self._emit_changed(state, reason='slot_removed')

    def on_slot_color_set(self, sender, **kwargs):
        state = get_puzzle_state(self.world)
        if state is None:
            return
        index = self._slot_index(state, kwargs.get('index'))
        color = kwargs.get('color')
        if index is None or not get_palette(self.world).is_known(color):
            return
        if state.slots[index] == color:
            return
        state.slots[index] = color
        self._emit_changed(state, reason='slot_color')

    def on_slot_color_cycle(self, sender, **kwargs):
        state = get_puzzle_state(self.world)
        if state is None:
            return
        index = self._slot_index(state, kwargs.get('index'))
        step = coerce_int(kwargs.get('step', 1), default=1)
        if index is None or not step:
            return
        state.slots[index] = get_palette(self.world).step(state.slots[index], step)
        self._emit_changed(state, reason='slot_color')

    # Target -------------------------------------------------------------

    def on_target_color_set(self, sender, **kwargs):
        state = get_puzzle_state(self.world)
        color = kwargs.get('color')
        if state is None or not get_palette(self.world).is_known(color):
            return
        if state.target == color:
            return
        state.target = color
        self._emit_changed(state, reason='target_color')

    def on_target_color_cycle(self, sender, **kwargs):
        state = get_puzzle_state(self.world)
        step = coerce_int(kwargs.get('step', 1), default=1)
        if state is None or not step:
            return
        state.target = get_palette(self.world).step(state.target, step)
        self._emit_changed(state, reason='target_color')

    # Inventory ----------------------------------------------------------

    def on_inventory_set(self, sender, **kwargs):
        inventory = get_inventory(self.world)
        if inventory is None or not inventory.editable:
            return
        color_value = coerce_int(kwargs.get('color_value'))
        if color_value is None or color_value not in inventory.counts:
            return
        inventory.set_count(color_value, coerce_non_negative(kwargs.get('count')))
        state = get_puzzle_state(self.world)
        if state is not None:
            self._emit_changed(state, reason='inventory')

    # Whole puzzle -------------------------------------------------------

    def on_randomize(self, sender, **kwargs):
        state = get_puzzle_state(self.world)
        if state is None:
            return
        names = get_palette(self.world).names()
        rng = getattr(self.world, 'random')
        state.slots = [rng.choice(names) for _ in state.slots]
        state.target = rng.choice(names)
        self._emit_changed(state, reason='randomized')

    def _slot_index(self, state: PuzzleState, raw) -> int | None:
        index = coerce_int(raw)
        if index is None or not 0 <= index < len(state.slots):
            return None
        return index

    def _emit_changed(self, state: PuzzleState, *, reason: str) -> None:
        inventory: Inventory | None = get_inventory(self.world)
        logger.debug("Puzzle changed (%s): target=%s slots=%s", reason, state.target, state.slots)
        self.event_bus.emit(
            EVENT_PUZZLE_CHANGED,
            reason=reason,
            target=state.target,
            slots=list(state.slots),
            inventory=dict(inventory.counts) if inventory is not None else {},
        )
