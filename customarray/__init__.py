from .datastructures import CustomArray

__version__ = "0.1.0"

__all__ = ["CustomArray", "__version__"]
