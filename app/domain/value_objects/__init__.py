"""Value objects package."""
from .comparison import (
    DEFAULT_QUALITY_FILTER,
    ComparisonRequest,
    ImageSource,
    InlineBytes,
    ObjectReference,
    QualityFilter,
)
from .recognition import (
    CombinedComparisonResult,
    CompareFacesResponse,
    EncodedImage,
    FaceMatchCandidate,
    MatchResult,
)

__all__ = [
    "DEFAULT_QUALITY_FILTER",
    "CombinedComparisonResult",
    "CompareFacesResponse",
    "ComparisonRequest",
    "EncodedImage",
    "FaceMatchCandidate",
    "ImageSource",
    "InlineBytes",
    "MatchResult",
    "ObjectReference",
    "QualityFilter",
]
