"""Domain entities package."""
from .face import BoundingBox, ComparedFace, ComparedSourceImageFace

__all__ = ["BoundingBox", "ComparedFace", "ComparedSourceImageFace"]
