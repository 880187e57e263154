"""
Blob labeling: find every same-colored connected region of an image.

Single-pass connected-component labeling with a union-find resolving
label equivalences, followed by a resolution pass that records where
each object was first and last seen.

    blobs = Blobs(PixelGrid(image))
    for pair in blobs:
        print(pair.first)
"""

from typing import Dict, Iterator, List, Optional, Tuple, Hashable
import logging
import numpy as np

from .models import Coord, CoordPair
from .union_find import UnionFind

logger = logging.getLogger(__name__)

# Label 0 is reserved for "no object"
DEFAULT_LABEL = 0

# Already-visited neighbors, in priority order: left, up left, up, up right
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)


def _color_rows(grid) -> List[List[Hashable]]:
    """Nested row lists of comparable colors from any pixel grid."""
    if hasattr(grid, "color_rows"):
        return grid.color_rows()
    return [
        [grid.color_at(Coord(x, y)) for x in range(grid.width)]
        for y in range(grid.height)
    ]


class Blobs:
    """
    Connected regions ("blobs") of identical color in a pixel grid.

    Any object with ``width``, ``height`` and ``color_at(coord)`` can be
    labeled; PixelGrid is the numpy-backed one.

    Attributes:
        labels: Read-only HxW int32 array of resolved labels
    """

    default_label = DEFAULT_LABEL

    def __init__(self, grid, log: Optional[logging.Logger] = None):
        """
        Label every pixel of grid.

        Args:
            grid: Pixel grid to label
            log: Diagnostic sink for bookkeeping anomalies (module logger if omitted)
        """
        self._log = log or logger
        self._width = int(grid.width)
        self._height = int(grid.height)
        self._set: UnionFind[int] = UnionFind(not_found=DEFAULT_LABEL)
        self._objects: Dict[int, CoordPair] = {}

        colors = _color_rows(grid)
        labels = self._assign(colors)
        self._resolve(labels)

        self.labels = np.array(labels, dtype=np.int32).reshape(self._height, self._width)
        self.labels.setflags(write=False)

    def _assign(self, colors: List[List[Hashable]]) -> List[List[int]]:
        """First pass: provisional labels plus recorded equivalences."""
        w = self._width
        h = self._height
        labels = [[DEFAULT_LABEL] * w for _ in range(h)]
        next_label = DEFAULT_LABEL + 1

        for y in range(h):
            row = colors[y]
            for x in range(w):
                current_color = row[x]
                count = 0

                for dx, dy in NEIGHBOR_OFFSETS:
                    px = x + dx
                    py = y + dy

                    # Outside the grid never matches, even if the color would
                    if px < 0 or py < 0 or px >= w or py >= h:
                        continue
                    if colors[py][px] != current_color:
                        continue

                    neighbor_label = labels[py][px]
                    if count == 0:
                        labels[y][x] = neighbor_label
                    elif labels[y][x] != neighbor_label:
                        self._set.join(labels[y][x], neighbor_label)
                    count += 1

                # No neighboring pixel the same color: potentially a new object
                if count == 0:
                    labels[y][x] = next_label
                    self._set.add(next_label)
                    next_label += 1

        return labels

    def _resolve(self, labels: List[List[int]]) -> None:
        """Second pass: replace labels by representatives and build the registry."""
        for y in range(self._height):
            row = labels[y]
            for x in range(self._width):
                current = row[x]
                if current == DEFAULT_LABEL:
                    continue

                rep = self._set.find(current)
                if rep == self._set.not_found:
                    self._log.warning(f"couldn't find representative of label {current}")
                    row[x] = DEFAULT_LABEL
                    continue

                row[x] = rep
                point = Coord(x, y)
                pair = self._objects.get(rep)
                if pair is None:
                    self._objects[rep] = CoordPair(point, point)
                else:
                    pair.last = point

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def label(self, point: Coord) -> int:
        """Resolved label at point, or the default label outside the grid."""
        x, y = point
        if 0 <= x < self._width and 0 <= y < self._height:
            return int(self.labels[y, x])
        return DEFAULT_LABEL

    def object(self, label: int) -> CoordPair:
        """First/last seen pair for a resolved label, or an empty pair if absent."""
        pair = self._objects.get(label)
        if pair is None:
            return CoordPair()
        return CoordPair(pair.first, pair.last)

    def objects_touching(self, p1: Coord, p2: Coord) -> List[Coord]:
        """
        First points of every object with a pixel in the rectangle [p1, p2).

        p1 is the top-left corner (inclusive) and p2 the bottom-right
        (exclusive). Each object is reported once, in the order its first
        pixel inside the rectangle is met in a raster scan.
        """
        x1 = max(p1[0], 0)
        y1 = max(p1[1], 0)
        x2 = min(p2[0], self._width)
        y2 = min(p2[1], self._height)

        if x1 >= x2 or y1 >= y2:
            return []

        region = self.labels[y1:y2, x1:x2].ravel()
        found, first_index = np.unique(region, return_index=True)

        subset = []
        for index in np.argsort(first_index):
            label = int(found[index])
            if label == DEFAULT_LABEL:
                continue

            pair = self._objects.get(label)
            if pair is None:
                self._log.warning(f"couldn't find object with label {label}")
                continue
            subset.append(pair.first)

        return subset

    def objects_starting_in(self, p1: Coord, p2: Coord) -> List[Coord]:
        """
        First points lying within the rectangle spanned by p1 and p2 (inclusive).

        Assumes p2 is down and to the right of p1. The registry is ordered by
        first point in raster order, so the scan stops at the first object
        starting below the rectangle.
        """
        subset = []
        for pair in self._objects.values():
            first = pair.first
            if first.y > p2[1]:
                break
            if p1[1] <= first.y and p1[0] <= first.x <= p2[0]:
                subset.append(first)
        return subset

    def items(self) -> Iterator[Tuple[int, CoordPair]]:
        """(label, pair) for every object, in discovery order."""
        for label, pair in self._objects.items():
            yield label, CoordPair(pair.first, pair.last)

    def __iter__(self) -> Iterator[CoordPair]:
        for _, pair in self.items():
            yield pair

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, label: object) -> bool:
        return label in self._objects
