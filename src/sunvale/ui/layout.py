"""Page geometry shared by the render and input systems.

Everything here is pure arithmetic on window size and puzzle shape so the
same hit regions can be rebuilt in headless tests.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from sunvale.components.app_state import AppTab
from sunvale.components.widgets import Bounds, Widget, WidgetAction
from sunvale.constants import (
    BUTTON_GAP,
    BUTTON_HEIGHT,
    BUTTON_WIDTH,
    INVENTORY_ITEM_GAP,
    INVENTORY_ITEM_HEIGHT,
    INVENTORY_ITEM_WIDTH,
    MIN_SLOT_COUNT,
    PAGE_MARGIN,
    SECTION_GAP,
    SECTION_TITLE_HEIGHT,
    SLOT_CARD_GAP,
    SLOT_CARD_HEIGHT,
    SLOT_CARD_WIDTH,
    SOLUTION_PANEL_MIN_WIDTH,
    SOLUTION_PANEL_WIDTH_PCT,
    SWATCH_SIZE,
    TAB_BAR_HEIGHT,
    TAB_WIDTH,
    TARGET_SWATCH_SIZE,
    THEME_BUTTON_WIDTH,
)


@dataclass(slots=True)
class PageLayout:
    window_width: float
    window_height: float
    widgets: List[Widget] = field(default_factory=list)
    # Section title anchors: name -> (left, baseline)
    titles: Dict[str, Tuple[float, float]] = field(default_factory=dict)
    controls_bounds: Optional[Bounds] = None
    solution_bounds: Optional[Bounds] = None
    target_swatch: Optional[Bounds] = None
    slot_cards: List[Bounds] = field(default_factory=list)
    inventory_items: List[Tuple[int, Bounds]] = field(default_factory=list)

    def widget_at(self, x: float, y: float) -> Widget | None:
        # Later widgets are drawn on top, so search back to front.
        for widget in reversed(self.widgets):
            if widget.contains(x, y):
                return widget
        return None

    def widgets_for(self, action: WidgetAction) -> List[Widget]:
        return [widget for widget in self.widgets if widget.action == action]


def swatch_in_card(card: Bounds) -> Bounds:
    """Square swatch centred in the lower part of a slot or inventory card."""
    left, bottom, width, height = card
    size = min(SWATCH_SIZE, width - 8)
    return (left + (width - size) / 2, bottom + 8, size, size)


def _flow_cards(
    count: int,
    left: float,
    top: float,
    available_width: float,
    card_width: float,
    card_height: float,
    gap: float,
) -> Tuple[List[Bounds], float]:
    """Lay ``count`` cards left to right, wrapping rows; return bounds and lowest bottom."""
    per_row = max(1, int((available_width + gap) // (card_width + gap)))
    bounds: List[Bounds] = []
    bottom = top
    for index in range(count):
        row, col = divmod(index, per_row)
        card_left = left + col * (card_width + gap)
        bottom = top - card_height - row * (card_height + gap)
        bounds.append((card_left, bottom, card_width, card_height))
    return bounds, bottom


def compute_tab_bar(window_width: float, window_height: float, active_tab: AppTab) -> List[Widget]:
    bar_bottom = window_height - TAB_BAR_HEIGHT
    widgets: List[Widget] = []
    for index, tab in enumerate(AppTab):
        widgets.append(
            Widget(
                action=WidgetAction.SELECT_TAB,
                bounds=(PAGE_MARGIN + index * (TAB_WIDTH + 4), bar_bottom, TAB_WIDTH, TAB_BAR_HEIGHT),
                label=tab.label,
                argument=tab,
                enabled=tab.enabled,
            )
        )
    widgets.append(
        Widget(
            action=WidgetAction.TOGGLE_THEME,
            bounds=(
                window_width - PAGE_MARGIN - THEME_BUTTON_WIDTH,
                bar_bottom + (TAB_BAR_HEIGHT - BUTTON_HEIGHT) / 2,
                THEME_BUTTON_WIDTH,
                BUTTON_HEIGHT,
            ),
            label="Theme",
        )
    )
    return widgets


def compute_page_layout(
    window_width: float,
    window_height: float,
    *,
    active_tab: AppTab,
    slot_count: int,
    inventory_values: Sequence[int],
    inventory_editable: bool,
) -> PageLayout:
    """Return widget hit regions and section geometry for the current frame."""
    layout = PageLayout(window_width=window_width, window_height=window_height)
    layout.widgets.extend(compute_tab_bar(window_width, window_height, active_tab))
    if active_tab is not AppTab.COLOR_PUZZLE:
        return layout

    content_top = window_height - TAB_BAR_HEIGHT - PAGE_MARGIN
    content_bottom = PAGE_MARGIN
    solution_width = max(SOLUTION_PANEL_MIN_WIDTH, window_width * SOLUTION_PANEL_WIDTH_PCT)
    solution_left = window_width - PAGE_MARGIN - solution_width
    layout.solution_bounds = (solution_left, content_bottom, solution_width, content_top - content_bottom)

    controls_left = PAGE_MARGIN
    controls_width = max(SLOT_CARD_WIDTH, solution_left - PAGE_MARGIN - controls_left)
    layout.controls_bounds = (controls_left, content_bottom, controls_width, content_top - content_bottom)

    cursor = content_top
    # Target
    layout.titles["target"] = (controls_left, cursor - SECTION_TITLE_HEIGHT + 6)
    cursor -= SECTION_TITLE_HEIGHT
    layout.target_swatch = (controls_left, cursor - TARGET_SWATCH_SIZE, TARGET_SWATCH_SIZE, TARGET_SWATCH_SIZE)
    layout.widgets.append(
        Widget(action=WidgetAction.CYCLE_TARGET, bounds=layout.target_swatch, label="Target")
    )
    cursor -= TARGET_SWATCH_SIZE + SECTION_GAP

    # Slots, with the add/remove buttons on the title row
    title_bottom = cursor - SECTION_TITLE_HEIGHT
    layout.titles["slots"] = (controls_left, title_bottom + 6)
    button_bottom = title_bottom + (SECTION_TITLE_HEIGHT - BUTTON_HEIGHT) / 2
    add_left = controls_left + controls_width - 2 * BUTTON_WIDTH - BUTTON_GAP
    layout.widgets.append(
        Widget(
            action=WidgetAction.ADD_SLOT,
            bounds=(add_left, button_bottom, BUTTON_WIDTH, BUTTON_HEIGHT),
            label="Add Slot",
        )
    )
    if slot_count > MIN_SLOT_COUNT:
        layout.widgets.append(
            Widget(
                action=WidgetAction.REMOVE_SLOT,
                bounds=(add_left + BUTTON_WIDTH + BUTTON_GAP, button_bottom, BUTTON_WIDTH, BUTTON_HEIGHT),
                label="Remove Slot",
            )
        )
    cursor = title_bottom - BUTTON_GAP
    cards, lowest = _flow_cards(
        slot_count, controls_left, cursor, controls_width, SLOT_CARD_WIDTH, SLOT_CARD_HEIGHT, SLOT_CARD_GAP
    )
    layout.slot_cards = cards
    for index, card in enumerate(cards):
        layout.widgets.append(
            Widget(action=WidgetAction.CYCLE_SLOT, bounds=card, label=f"Slot {index + 1}", argument=index)
        )
    cursor = lowest - SECTION_GAP

    # Inventory
    title_bottom = cursor - SECTION_TITLE_HEIGHT
    layout.titles["inventory"] = (controls_left, title_bottom + 6)
    cursor = title_bottom - BUTTON_GAP
    items, lowest = _flow_cards(
        len(inventory_values),
        controls_left,
        cursor,
        controls_width,
        INVENTORY_ITEM_WIDTH,
        INVENTORY_ITEM_HEIGHT,
        INVENTORY_ITEM_GAP,
    )
    for color_value, item in zip(inventory_values, items):
        layout.inventory_items.append((int(color_value), item))
        layout.widgets.append(
            Widget(
                action=WidgetAction.EDIT_INVENTORY,
                bounds=item,
                argument=int(color_value),
                enabled=inventory_editable,
            )
        )
    cursor = lowest - SECTION_GAP

    # Actions
    action_bottom = cursor - BUTTON_HEIGHT
    layout.widgets.append(
        Widget(
            action=WidgetAction.RANDOMIZE,
            bounds=(controls_left, action_bottom, BUTTON_WIDTH, BUTTON_HEIGHT),
            label="Randomize",
        )
    )
    layout.widgets.append(
        Widget(
            action=WidgetAction.SOLVE,
            bounds=(controls_left + BUTTON_WIDTH + BUTTON_GAP, action_bottom, BUTTON_WIDTH, BUTTON_HEIGHT),
            label="Solve",
        )
    )
    return layout
