"""Application services."""
from .face_comparison import FaceComparisonService
from .image_fetcher import ImageFetcher
from .url_comparison import UrlComparisonService

__all__ = ["FaceComparisonService", "ImageFetcher", "UrlComparisonService"]
