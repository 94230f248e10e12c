from dataclasses import dataclass
from typing import Optional

import numpy as np

from bonsai.util import ansi


@dataclass(frozen=True)
class Cell:
    glyph: str
    color: object
    bold: bool


class Canvas:
    """
    Grid the tree is drawn onto, indexed ``[x, y]`` with y growing downwards.

    Glyphs longer than one character spill over into the following columns
    and are clipped at the right edge. Anything placed outside the grid is
    dropped.
    """

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height
        self.glyphs = np.full((width, height), ' ', dtype='<U1')
        self.colors = np.full((width, height), None, dtype=object)
        self.bold = np.zeros((width, height), dtype=bool)

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def put(self, x: int, y: int, glyph: str, color, bold: bool):
        for offset, char in enumerate(glyph):
            if not self.in_bounds(x + offset, y):
                continue
            self.glyphs[x + offset, y] = char
            self.colors[x + offset, y] = color
            self.bold[x + offset, y] = bold

    def write(self, x: int, y: int, text: str, color=None, bold=False):
        """Writes text that may contain newlines, each line starting at ``x``."""
        for i, line in enumerate(text.split('\n')):
            self.put(x, y + i, line, color, bold)

    def refresh(self):
        pass

    def clear(self):
        self.clear_area(0, 0, self._width, self._height)

    def clear_area(self, x: int, y: int, width: int, height: int):
        area = (slice(max(0, x), max(0, x + width)), slice(max(0, y), max(0, y + height)))
        self.glyphs[area] = ' '
        self.colors[area] = None
        self.bold[area] = False

    def blit(self, other: 'Canvas', x: int, y: int):
        """Copies everything drawn on ``other`` onto this canvas with its corner at ``(x, y)``."""
        for ox, oy in zip(*np.nonzero(other.glyphs != ' ')):
            tx, ty = x + int(ox), y + int(oy)
            if self.in_bounds(tx, ty):
                self.glyphs[tx, ty] = other.glyphs[ox, oy]
                self.colors[tx, ty] = other.colors[ox, oy]
                self.bold[tx, ty] = other.bold[ox, oy]

    def __getitem__(self, item: tuple[int, int]) -> Optional[Cell]:
        x, y = item
        if not self.in_bounds(x, y):
            return None
        return Cell(str(self.glyphs[x, y]), self.colors[x, y], bool(self.bold[x, y]))

    def bounding_box(self) -> Optional[tuple[int, int, int, int]]:
        """``(left, top, right, bottom)`` of everything drawn, inclusive. None if empty."""
        xs, ys = np.nonzero(self.glyphs != ' ')
        if len(xs) == 0:
            return None
        return int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max())

    def rows(self, *, trim=False) -> list[str]:
        return self.render_rows(color=False, trim=trim)

    def render_rows(self, *, color=True, allow_bright=True, trim=False) -> list[str]:
        left, top, right, bottom = 0, 0, self._width - 1, self._height - 1
        if trim:
            box = self.bounding_box()
            if box is None:
                return []
            left, top, right, bottom = box
        lines = []
        for y in range(top, bottom + 1):
            line = ''
            current = None
            for x in range(left, right + 1):
                char = str(self.glyphs[x, y])
                if color:
                    style = self._style(x, y) if char != ' ' else None
                    if style != current:
                        line += self._format(style, allow_bright)
                        current = style
                line += char
            if color and current is not None:
                line += ansi.RESET
            lines.append(line.rstrip() if not color else line)
        return lines

    def render(self, *, color=True, allow_bright=True, trim=False) -> str:
        return '\n'.join(self.render_rows(color=color, allow_bright=allow_bright, trim=trim))

    def _style(self, x, y):
        return self.colors[x, y], bool(self.bold[x, y])

    @staticmethod
    def _format(style, allow_bright) -> str:
        if style is None:
            return ansi.RESET
        color, bold = style
        code = None
        if color is not None:
            code = ansi.color_code(color.code, color.bright, allow_bright=allow_bright)
        return ansi.format_attributes(ansi.BOLD if bold else None, code)

    def __str__(self):
        return '\n'.join(self.rows())


class RecordingCanvas(Canvas):
    """Canvas that remembers every put, in order."""

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.writes: list[tuple[int, int, str, object, bool]] = []
        self.refreshes = 0

    def put(self, x: int, y: int, glyph: str, color, bold: bool):
        self.writes.append((x, y, glyph, color, bold))
        super().put(x, y, glyph, color, bold)

    def refresh(self):
        self.refreshes += 1
