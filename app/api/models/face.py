"""API specific face comparison models."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from app.domain.value_objects.recognition import CombinedComparisonResult, MatchResult

# Constants for validation ranges used in API models
MIN_SCORE = 0.0
MAX_SCORE = 100.0


class RawComparisonRequest(BaseModel):
    """Request model for the /raw endpoint."""
    src_image: str = Field(
        ...,
        description="S3 object key (path) of the source image",
        min_length=1, max_length=1024
    )
    reference_image: str = Field(
        ...,
        description="S3 object key (path) of the reference image",
        min_length=1, max_length=1024
    )


class RawComparisonResponse(BaseModel):
    """Response model for the /raw endpoint."""
    has_match: bool = Field(..., description="Whether both images show the same face")
    score: float = Field(..., description="Similarity of the best match (0-100)",
                         ge=MIN_SCORE, le=MAX_SCORE)
    most_significant_match: Dict[str, Any] = Field(
        default_factory=dict,
        description="Rekognition face descriptor of the best match, empty without a match"
    )

    @classmethod
    def from_match_result(cls, result: MatchResult) -> "RawComparisonResponse":
        """Convert a service MatchResult to the API response model."""
        face = result.most_matched_face
        return cls(
            has_match=result.has_match,
            score=result.score,
            most_significant_match=(
                face.model_dump(by_alias=True, exclude_none=True) if face else {}
            ),
        )


class CombinedComparisonRequest(BaseModel):
    """Request model for the /combined endpoint."""
    src_image_url: str = Field(
        ...,
        description="URL of the source image, its path is the S3 object key",
        min_length=1
    )
    target_image_url: str = Field(
        ...,
        description="URL of the target image, its path is the S3 object key",
        min_length=1
    )


class MatchResultResponse(BaseModel):
    """API model for a single comparison result."""
    has_match: bool = Field(..., description="Whether both images show the same face")
    score: float = Field(..., description="Similarity of the best match (0-100)",
                         ge=MIN_SCORE, le=MAX_SCORE)
    # Both are dumped without None so only keys Rekognition sent come back
    most_matched_face: Optional[Dict[str, Any]] = Field(
        None, description="Rekognition face descriptor of the best match"
    )
    raw_response: Dict[str, Any] = Field(..., description="Unmodified Rekognition response")

    @classmethod
    def from_match_result(cls, result: MatchResult) -> "MatchResultResponse":
        face = result.most_matched_face
        return cls(
            has_match=result.has_match,
            score=result.score,
            most_matched_face=(
                face.model_dump(by_alias=True, exclude_none=True) if face else None
            ),
            raw_response=result.raw_response.model_dump(by_alias=True, exclude_none=True),
        )


class CombinedComparisonResponse(BaseModel):
    """Response model for the /combined endpoint."""
    high_confidence_match: bool = Field(
        ..., description="Diagnostic flag: S3 reference score above the high confidence score"
    )
    s3_reference_response: MatchResultResponse = Field(
        ..., description="Result of comparing both images by S3 reference"
    )
    bytes_response: MatchResultResponse = Field(
        ..., description="Result of comparing both images as raw bytes"
    )
    mix_response: MatchResultResponse = Field(
        ..., description="Result of comparing the S3 source with the target bytes"
    )

    @classmethod
    def from_service_response(cls, result: CombinedComparisonResult) -> "CombinedComparisonResponse":
        """Convert the service layer result to the API response model."""
        return cls(
            high_confidence_match=result.high_confidence_match,
            s3_reference_response=MatchResultResponse.from_match_result(result.reference_result),
            bytes_response=MatchResultResponse.from_match_result(result.bytes_result),
            mix_response=MatchResultResponse.from_match_result(result.mixed_result),
        )
