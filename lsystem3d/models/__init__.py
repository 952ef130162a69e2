from .geometry import Point3D, Quaternion, Bounds, X_AXIS, Y_AXIS, Z_AXIS
from .result import LineSegment, GenerationResult, ResultStats
from .parameters import GeneratorParams, GenerationConfig, check_parameter_names

__all__ = [
    "Point3D", "Quaternion", "Bounds", "X_AXIS", "Y_AXIS", "Z_AXIS",
    "LineSegment", "GenerationResult", "ResultStats",
    "GeneratorParams", "GenerationConfig", "check_parameter_names",
]
