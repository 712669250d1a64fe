from .math import Point, evaluate, parameter_values, sample_group, within_tolerance
from .curve_model import CurveModel
from .settings import EditorSettings
from .editor import CurveEditor, MouseButton
