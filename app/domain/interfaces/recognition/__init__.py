from .face_comparison import FaceComparisonClient

__all__ = ["FaceComparisonClient"]
