import logging
from typing import Optional

from .math import Point, sample_group, within_tolerance

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 16
DEFAULT_MAX_GROUP_SIZE = 4


class CurveModel:
    """
    Chain of Bézier segments over a flat list of control points.

    Everything is referenced by position:
      - control points: list of (x, y)
      - groups: list of index lists, one per segment (degree = len - 1)
      - samples: cached curve points, samples[i] belongs to groups[i]

    Consecutive groups share one boundary index (groups[i][-1] == groups[i+1][0]).
    New points always extend the last group until it holds `max_group_size`
    indices, then a new group is seeded with [last_index, new_index].
    """

    def __init__(self, resolution: int = DEFAULT_RESOLUTION, max_group_size: int = DEFAULT_MAX_GROUP_SIZE):
        if resolution < 1:
            raise ValueError(f"resolution must be >= 1, got {resolution}")
        if max_group_size < 2:
            raise ValueError(f"max_group_size must be >= 2, got {max_group_size}")
        self._resolution = resolution
        self._max_group_size = max_group_size
        self._points: list[Point] = []
        self._groups: list[list[int]] = []
        self._samples: list[list[Point]] = []
        self._stale: set[int] = set()

    # ---- read-only views ----------------------------------------------------
    @property
    def resolution(self) -> int:
        return self._resolution

    @property
    def max_group_size(self) -> int:
        return self._max_group_size

    def control_points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def groups(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(g) for g in self._groups)

    def sample_points(self) -> tuple[tuple[Point, ...], ...]:
        return tuple(tuple(s) for s in self._samples)

    def stale_groups(self) -> tuple[int, ...]:
        return tuple(sorted(self._stale))

    def __len__(self) -> int:
        return len(self._points)

    # ---- queries ------------------------------------------------------------
    def groups_of_point(self, point_index: int) -> list[int]:
        return [i for i, g in enumerate(self._groups) if point_index in g]

    def points_in_group(self, group_index: int) -> list[Point]:
        if not (0 <= group_index < len(self._groups)):
            raise IndexError(group_index)
        return [self._points[i] for i in self._groups[group_index]]

    def find_point_near(self, x: float, y: float, tolerance: float) -> Optional[int]:
        """
        Return the index of a control point within `tolerance` of (x, y) on
        both axes. On overlap the highest index wins.
        """
        found = None
        for i, p in enumerate(self._points):
            if within_tolerance(p, (x, y), tolerance):
                found = i
        return found

    # ---- sample cache -------------------------------------------------------
    def recompute_group_samples(self, group_index: int) -> None:
        pts = self.points_in_group(group_index)
        while len(self._samples) <= group_index:
            self._samples.append([])
        self._samples[group_index] = sample_group(pts, self._resolution)
        self._stale.discard(group_index)

    def recompute_samples_touching(self, point_index: int) -> None:
        for gi in self.groups_of_point(point_index):
            self.recompute_group_samples(gi)

    def recompute_stale(self) -> list[int]:
        done = sorted(self._stale)
        for gi in done:
            self.recompute_group_samples(gi)
        return done

    # ---- mutations ----------------------------------------------------------
    def _check_index(self, index: int) -> None:
        if not (0 <= index < len(self._points)):
            raise IndexError(index)

    def add_point(self, x: float, y: float) -> int:
        self._points.append((float(x), float(y)))
        new_index = len(self._points) - 1

        if not self._groups:
            self._groups.append([new_index])
            self._samples.append([])
        elif len(self._groups[-1]) < self._max_group_size:
            self._groups[-1].append(new_index)
        else:
            self._groups.append([self._groups[-1][-1], new_index])
            self._samples.append([])
            logger.debug("started group %d at boundary %d", len(self._groups) - 1, new_index - 1)

        logger.debug("added point %d at (%s, %s)", new_index, x, y)
        self.recompute_samples_touching(new_index)
        return new_index

    def move_point(self, index: int, x: float, y: float) -> None:
        """
        Overwrite a point's coordinates. Samples are not recomputed here; the
        touched groups are marked stale until `recompute_samples_touching` or
        `recompute_stale` runs.
        """
        self._check_index(index)
        self._points[index] = (float(x), float(y))
        self._stale.update(self.groups_of_point(index))

    def delete_point(self, index: int) -> None:
        """
        Remove a point. Later points shift down one position, so the group
        table keeps its shape minus its final slot: the last group loses its
        final index and any group left with fewer than 2 indices is spliced out
        (a sole remaining group may keep a single index).

        Indices held across this call are invalid afterwards.
        """
        self._check_index(index)
        self._points.pop(index)
        logger.debug("deleted point %d", index)

        if not self._points:
            self.clear()
            return

        self._groups[-1].pop()
        for gi in range(len(self._groups) - 1, -1, -1):
            if len(self._groups[gi]) < 2 and len(self._groups) > 1:
                del self._groups[gi]
                del self._samples[gi]
                logger.debug("spliced out group %d", gi)
        self._stale = {gi for gi in self._stale if gi < len(self._groups)}

        # every group holding the deleted position or a later one now refers
        # to different points
        first_shifted = min(index, len(self._points) - 1)
        for gi, g in enumerate(self._groups):
            if max(g) >= first_shifted:
                self.recompute_group_samples(gi)

    def clear(self) -> None:
        self._points = []
        self._groups = []
        self._samples = []
        self._stale = set()
