"""
.. module:: layout
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains an adaptive grid layout that packs items into rows (or columns) of cells
               sized by per-column width ratios.  The layout works with plain rectangles so it
               can drive any presentation surface.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

from typing import List, NamedTuple, Sequence

import math

from mojo.errors.exceptions import SemanticError

from mojo.nettools.constants import DEFAULT_LAYOUT_PADDING

RATIO_TOLERANCE = 1e-6


class Size(NamedTuple):
    width: float
    height: float


class Position(NamedTuple):
    x: float
    y: float


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def overlaps(self, other: "Rect") -> bool:
        """
            Returns True when the two rectangles share some interior area.  Touching edges do
            not count as overlap.
        """
        if self.x + self.width <= other.x + RATIO_TOLERANCE or other.x + other.width <= self.x + RATIO_TOLERANCE:
            return False
        if self.y + self.height <= other.y + RATIO_TOLERANCE or other.y + other.height <= self.y + RATIO_TOLERANCE:
            return False
        return True


class GridCell:
    """
        A simple item that can be arranged by the :class:`AdaptiveGridLayout`.  Any object with
        a 'visible' flag and a 'min_size' can be laid out.
    """

    def __init__(self, min_size: Size = Size(0.0, 0.0), visible: bool = True, name: str = ""):
        self.min_size = min_size
        self.visible = visible
        self.name = name
        return

    def __repr__(self) -> str:
        return "GridCell(name={!r}, visible={}, min_size={})".format(self.name, self.visible, tuple(self.min_size))


class AdaptiveGridLayout:
    """
        Packs visible items into a grid with one cell per ratio in each row.  In the horizontal
        orientation the ratios divide the width of each row, in the vertical orientation the grid
        is transposed and the ratios divide the height of each column.
    """

    def __init__(self, ratios: Sequence[float], padding: float = DEFAULT_LAYOUT_PADDING, horizontal: bool = True):
        if len(ratios) == 0:
            raise SemanticError("An adaptive grid layout requires at least one ratio.")

        for ratio in ratios:
            if ratio <= 0:
                raise SemanticError("Adaptive grid layout ratios must be positive. ratios={}".format(list(ratios)))

        if sum(ratios) > 1.0 + RATIO_TOLERANCE:
            raise SemanticError("Adaptive grid layout ratios must not add up to more than 1. ratios={}".format(list(ratios)))

        if padding < 0:
            raise SemanticError("Adaptive grid layout padding cannot be negative. padding={}".format(padding))

        self._ratios = [float(r) for r in ratios]
        self._padding = float(padding)
        self._horizontal = horizontal
        return

    @property
    def columns(self) -> int:
        return len(self._ratios)

    @property
    def horizontal(self) -> bool:
        return self._horizontal

    @property
    def padding(self) -> float:
        return self._padding

    @property
    def ratios(self) -> List[float]:
        return list(self._ratios)

    def count_rows(self, children: Sequence[GridCell]) -> int:
        count = len([child for child in children if child.visible])
        return int(math.ceil(count / len(self._ratios)))

    def layout(self, children: Sequence[GridCell], size: Size) -> List[Rect]:
        """
            Computes the rectangle for each visible child.

            :param children: The items to arrange, hidden items are skipped.
            :param size: The size of the area the items are arranged in.

            :returns: A rectangle for each visible child in child order.
        """
        rects = []

        lines = self.count_rows(children)
        if lines == 0:
            return rects

        cols = len(self._ratios)
        pad = self._padding

        if self._horizontal:
            ratio_span = size.width - pad * (cols - 1)
            line_span = (size.height - pad * (lines - 1)) / lines
        else:
            ratio_span = size.height - pad * (cols - 1)
            line_span = (size.width - pad * (lines - 1)) / lines

        ratio_span = max(ratio_span, 0.0)
        line_span = max(line_span, 0.0)

        # Offsets of each cell along the ratio axis, the same for every line
        offsets = []
        offset = 0.0
        for ratio in self._ratios:
            offsets.append(offset)
            offset += ratio_span * ratio + pad

        visible = [child for child in children if child.visible]
        for idx, _ in enumerate(visible):
            line, cell = divmod(idx, cols)
            along = offsets[cell]
            across = line * (line_span + pad)
            extent = ratio_span * self._ratios[cell]

            if self._horizontal:
                rects.append(Rect(along, across, extent, line_span))
            else:
                rects.append(Rect(across, along, line_span, extent))

        return rects

    def min_size(self, children: Sequence[GridCell]) -> Size:
        """
            Computes the smallest size that fits every visible child in a cell sized for the
            largest child.
        """
        lines = self.count_rows(children)
        cols = len(self._ratios)

        min_width = 0.0
        min_height = 0.0
        for child in children:
            if not child.visible:
                continue
            min_width = max(min_width, child.min_size.width)
            min_height = max(min_height, child.min_size.height)

        pad = self._padding
        if self._horizontal:
            width = min_width * cols + pad * max(cols - 1, 0)
            height = min_height * lines + pad * max(lines - 1, 0)
        else:
            width = min_width * lines + pad * max(lines - 1, 0)
            height = min_height * cols + pad * max(cols - 1, 0)

        return Size(width, height)
