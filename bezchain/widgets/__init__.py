from .canvas import CurveCanvasWidget

__all__ = [
    "CurveCanvasWidget",
]
