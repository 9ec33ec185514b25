"""Service interfaces package."""
from .recognition import FaceComparisonClient

__all__ = ["FaceComparisonClient"]
