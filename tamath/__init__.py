"""Price types, validation, rolling windows and element-wise math for technical analysis."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "constants",
    "elementwise",
    "errors",
    "models",
    "rolling",
    "rounding",
    "trigonometric",
    "utils",
]