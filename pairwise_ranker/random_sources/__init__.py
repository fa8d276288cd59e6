"""
Random source implementations.

Available implementations:
- StdlibRandomSource: uniform choice via ``random.Random``
- NumpyRandomSource: uniform choice via ``numpy.random.Generator``
"""

from .numpy_source import NumpyRandomSource
from .stdlib_source import StdlibRandomSource

__all__ = ["NumpyRandomSource", "StdlibRandomSource"]
