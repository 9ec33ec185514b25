"""Face comparison result value objects."""
from typing import List, Optional

from pydantic import BaseModel, Field

from app.domain.entities.face import ComparedFace, ComparedSourceImageFace, RekognitionModel


class FaceMatchCandidate(RekognitionModel):
    """One ranked candidate returned by CompareFaces. Index 0 is the best match."""
    similarity: Optional[float] = Field(None, alias="Similarity", description="Similarity (0-100)")
    face: Optional[ComparedFace] = Field(None, alias="Face")


class CompareFacesResponse(RekognitionModel):
    """Typed CompareFaces response, decoded once at the service boundary.

    Keys the model does not name (``ResponseMetadata`` for instance) are kept
    so the response can be reproduced for auditing.
    """
    source_image_face: Optional[ComparedSourceImageFace] = Field(None, alias="SourceImageFace")
    face_matches: Optional[List[FaceMatchCandidate]] = Field(None, alias="FaceMatches")
    unmatched_faces: Optional[List[ComparedFace]] = Field(None, alias="UnmatchedFaces")
    source_image_orientation_correction: Optional[str] = Field(
        None, alias="SourceImageOrientationCorrection"
    )
    target_image_orientation_correction: Optional[str] = Field(
        None, alias="TargetImageOrientationCorrection"
    )


class MatchResult(BaseModel):
    """Normalized verdict of a single comparison."""
    has_match: bool = Field(..., description="Whether both images show the same face")
    score: float = Field(0.0, description="Similarity of the best candidate (0-100)")
    most_matched_face: Optional[ComparedFace] = Field(
        None, description="Face descriptor of the best candidate, set only on a match"
    )
    raw_response: CompareFacesResponse = Field(..., description="Unmodified service response")


class EncodedImage(BaseModel):
    """Downloaded image as base64 text together with its decoded bytes."""
    base64_string: str
    data: bytes


class CombinedComparisonResult(BaseModel):
    """Outcome of comparing two URL-addressed images in every input mode."""
    reference_result: MatchResult = Field(..., description="S3 reference vs S3 reference")
    bytes_result: MatchResult = Field(..., description="Bytes vs bytes")
    mixed_result: MatchResult = Field(..., description="S3 reference vs bytes")
    high_confidence_match: bool = Field(
        ..., description="Diagnostic flag: reference score above the high confidence score"
    )
