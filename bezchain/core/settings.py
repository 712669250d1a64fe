from dataclasses import dataclass

from .curve_model import CurveModel, DEFAULT_RESOLUTION, DEFAULT_MAX_GROUP_SIZE


@dataclass()
class EditorSettings:
    """
      - resolution: sample intervals per group (resolution + 1 samples)
      - max_group_size: indices per group before a new segment starts
      - pick_tolerance: half-size of the box used to pick a control point
      - stroke_width / marker_radius / sample_radius: drawing sizes
      - frame_interval_ms: period of the per-frame update
    """
    resolution: int = DEFAULT_RESOLUTION
    max_group_size: int = DEFAULT_MAX_GROUP_SIZE
    pick_tolerance: float = 10.0
    stroke_width: float = 2.0
    marker_radius: float = 10.0
    sample_radius: float = 5.0
    frame_interval_ms: int = 16

    def __post_init__(self):
        if self.resolution < 1:
            raise ValueError(f"resolution must be >= 1, got {self.resolution}")
        if self.max_group_size < 2:
            raise ValueError(f"max_group_size must be >= 2, got {self.max_group_size}")
        if self.pick_tolerance < 0:
            raise ValueError("pick_tolerance must be non-negative")
        if self.frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be positive")

    def make_model(self) -> CurveModel:
        return CurveModel(resolution=self.resolution, max_group_size=self.max_group_size)
