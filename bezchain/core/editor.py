import logging
from enum import Enum
from typing import Optional

from .curve_model import CurveModel
from .settings import EditorSettings

logger = logging.getLogger(__name__)


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class CurveEditor:
    """
    GUI-agnostic gesture handling on top of a CurveModel:
      - left press: pick the point under the cursor and start dragging it
      - right press: add a point and start dragging it
      - middle press: delete the point under the cursor
      - motion: move the dragged point (samples are refreshed by `update`)
      - release: stop dragging
    """

    def __init__(self, model: Optional[CurveModel] = None, settings: Optional[EditorSettings] = None):
        self.settings = settings or EditorSettings()
        self.model = model if model is not None else self.settings.make_model()
        self.selected: Optional[int] = None
        self.mouse_down = False

    def press(self, button: MouseButton, x: float, y: float) -> bool:
        """Handle a button press. Returns True when the model changed."""
        if button == MouseButton.LEFT:
            self.mouse_down = True
            self.selected = self.model.find_point_near(x, y, self.settings.pick_tolerance)
            return False

        if button == MouseButton.RIGHT:
            self.mouse_down = True
            self.selected = self.model.add_point(x, y)
            return True

        if button == MouseButton.MIDDLE:
            idx = self.model.find_point_near(x, y, self.settings.pick_tolerance)
            # any held index is invalid after a deletion
            self.selected = None
            if idx is None:
                return False
            self.model.delete_point(idx)
            logger.info("deleted control point %d, %d left", idx, len(self.model))
            return True

        return False

    def motion(self, x: float, y: float) -> bool:
        if not self.mouse_down or self.selected is None:
            return False
        self.model.move_point(self.selected, x, y)
        return True

    def release(self, button: MouseButton, x: float, y: float) -> None:
        self.mouse_down = False
        self.selected = None

    def update(self) -> None:
        """
        Per-frame hook: refresh the samples around the dragged point, then any
        group still left stale.
        """
        if self.selected is not None:
            self.model.recompute_samples_touching(self.selected)
        self.model.recompute_stale()
