from .custom_array import CustomArray, natural_order

__all__ = [
    "CustomArray",
    "natural_order",
]
