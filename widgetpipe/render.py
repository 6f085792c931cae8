"""
Rich rendering of a widget's wallpaper and border.

WidgetRenderable paints the cells a widget owns: the wallpaper fill and
every enabled border segment. Content drawing is left to subclasses of
Widget and their hosts. It can be printed with a Rich Console or returned
from a Textual widget's render().
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment
from rich.style import Style

from widgetpipe.widget import Glyph, Segment as BorderSegment, Widget

Cell = Tuple[str, Style]


class WidgetRenderable:
    """Renderable for one widget at a given size.

    Args:
        widget: Widget to paint
        width: Width in cells (defaults to widget.size.width)
        height: Height in cells (defaults to widget.size.height)
    """

    def __init__(self, widget: Widget, width: Optional[int] = None, height: Optional[int] = None) -> None:
        self.widget = widget
        self.width = widget.size.width if width is None else width
        self.height = widget.size.height if height is None else height

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        for row in self.render_rows():
            for symbol, style in row:
                yield Segment(symbol, style)
            yield Segment.line()

    def render_lines(self) -> List[str]:
        """Plain text of each row, without styles."""
        return ["".join(symbol for symbol, _ in row) for row in self.render_rows()]

    def render_rows(self) -> List[List[Cell]]:
        width, height = max(self.width, 0), max(self.height, 0)
        fill = self._fill_cell()
        rows = [[fill] * width for _ in range(height)]
        if width and height:
            self._paint_border(rows, width, height, fill)
        return rows

    def _fill_cell(self) -> Cell:
        widget = self.widget
        brush_style = widget.brush.to_style()
        if widget.wallpaper is None:
            return (" ", brush_style)
        if widget.wallpaper_with_brush:
            return (widget.wallpaper.symbol, brush_style)
        return (widget.wallpaper.symbol, widget.wallpaper.style)

    def _glyph_cell(self, glyph: Glyph) -> Cell:
        return (glyph.symbol, glyph.brush.merged_over(self.widget.brush).to_style())

    def _corner_cell(self, corner: BorderSegment, *walls: BorderSegment, fill: Cell) -> Cell:
        for segment in (corner, *walls):
            if segment.enabled:
                return self._glyph_cell(segment.glyph)
        return fill

    def _wall_cell(self, wall: BorderSegment, fill: Cell) -> Cell:
        return self._glyph_cell(wall.glyph) if wall.enabled else fill

    def _paint_border(self, rows: List[List[Cell]], width: int, height: int, fill: Cell) -> None:
        border = self.widget.border
        s = border.segments
        top, bottom = border.north_enabled(), border.south_enabled()
        left, right = border.west_enabled(), border.east_enabled()

        first_row, last_row = 0, height - 1
        first_col, last_col = 0, width - 1

        if top:
            rows[first_row] = list(
                self._edge_row(width, left, right, s.north, s.north_west, s.north_east, s.west, s.east, fill)
            )
        if bottom and (last_row != first_row or not top):
            rows[last_row] = list(
                self._edge_row(width, left, right, s.south, s.south_west, s.south_east, s.west, s.east, fill)
            )

        body_start = first_row + (1 if top else 0)
        body_end = last_row - (1 if bottom else 0)
        for y in range(body_start, body_end + 1):
            if left:
                rows[y][first_col] = self._wall_cell(s.west, fill)
            if right and (last_col != first_col or not left):
                rows[y][last_col] = self._wall_cell(s.east, fill)

    def _edge_row(
        self,
        width: int,
        left: bool,
        right: bool,
        wall: BorderSegment,
        left_corner: BorderSegment,
        right_corner: BorderSegment,
        left_wall: BorderSegment,
        right_wall: BorderSegment,
        fill: Cell,
    ) -> Iterable[Cell]:
        for x in range(width):
            if x == 0 and left:
                yield self._corner_cell(left_corner, wall, left_wall, fill=fill)
            elif x == width - 1 and right:
                yield self._corner_cell(right_corner, wall, right_wall, fill=fill)
            else:
                yield self._wall_cell(wall, fill)


def render_widget(widget: Widget, width: Optional[int] = None, height: Optional[int] = None) -> List[str]:
    """Plain-text rows for widget; handy for logging and tests."""
    return WidgetRenderable(widget, width, height).render_lines()
