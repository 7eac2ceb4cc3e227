from __future__ import annotations

from typing import TYPE_CHECKING, List

from sunvale.constants import SOLUTION_LINE_HEIGHT
from sunvale.rendering.primitives import draw_panel

if TYPE_CHECKING:
    from sunvale.components.solution_state import SolutionState
    from sunvale.rendering.context import RenderContext

PLACEHOLDER_TEXT = "Click Solve to generate solution steps."
NO_SOLUTION_TEXT = "No solution found for the current setup."


def solution_panel_lines(solution: SolutionState | None) -> List[str]:
    """Text shown in the results panel, one entry per line."""
    if solution is None or not solution.has_solved:
        return [PLACEHOLDER_TEXT]
    if not solution.lines:
        return [NO_SOLUTION_TEXT]
    return [f"{index}. {line}" for index, line in enumerate(solution.lines, start=1)]


class SolutionPanelRenderer:
    def render(self, arcade, ctx: RenderContext) -> None:
        bounds = ctx.layout.solution_bounds
        if bounds is None:
            return
        colors = ctx.colors
        draw_panel(arcade, bounds, colors)
        left, bottom, width, height = bounds
        top = bottom + height
        arcade.draw_text("Solution", left + 16, top - 36, colors.text, 18, bold=True)
        has_steps = bool(ctx.solution and ctx.solution.has_solved and ctx.solution.lines)
        text_color = colors.text if has_steps else colors.muted_text
        y = top - 36 - SOLUTION_LINE_HEIGHT * 1.5
        for line in solution_panel_lines(ctx.solution):
            if y < bottom + 8:
                break
            arcade.draw_text(
                line,
                left + 16,
                y,
                text_color,
                14,
                multiline=True,
                width=int(max(40, width - 32)),
            )
            y -= SOLUTION_LINE_HEIGHT
