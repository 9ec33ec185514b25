"""Value objects describing a single face comparison request."""
from enum import Enum
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field


class QualityFilter(str, Enum):
    """Rekognition pre-filter for low quality faces."""
    NONE = "NONE"
    AUTO = "AUTO"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# Service-wide policy: only compare faces Rekognition rates as high quality
DEFAULT_QUALITY_FILTER = QualityFilter.HIGH


class ObjectReference(BaseModel):
    """An image stored in S3, addressed by bucket and key."""
    model_config = ConfigDict(frozen=True)

    bucket: str = Field(..., description="S3 bucket holding the image")
    key: str = Field(..., description="S3 object key (path) of the image")

    def to_image(self) -> Dict[str, Any]:
        return {"S3Object": {"Bucket": self.bucket, "Name": self.key}}


class InlineBytes(BaseModel):
    """An image sent inline as raw bytes."""
    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., description="Raw image payload")

    def to_image(self) -> Dict[str, Any]:
        return {"Bytes": self.data}


ImageSource = Union[ObjectReference, InlineBytes]


class ComparisonRequest(BaseModel):
    """Input of one CompareFaces call.

    Source and target may use different image variants independently.
    """
    model_config = ConfigDict(frozen=True)

    source_image: ImageSource = Field(..., description="Image holding the face to look for")
    target_image: ImageSource = Field(..., description="Image searched for that face")
    similarity_threshold: float = Field(
        ..., ge=0.0, le=100.0, description="Minimum similarity for a candidate (0-100)"
    )
    quality_filter: QualityFilter = Field(DEFAULT_QUALITY_FILTER)

    def to_api_params(self) -> Dict[str, Any]:
        """Keyword arguments for ``client.compare_faces``."""
        return {
            "SourceImage": self.source_image.to_image(),
            "TargetImage": self.target_image.to_image(),
            "SimilarityThreshold": self.similarity_threshold,
            "QualityFilter": self.quality_filter.value,
        }
