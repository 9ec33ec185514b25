"""Core face domain entities.

These mirror the face descriptor returned by Rekognition. Every field is
optional because the service omits attributes it did not compute, and unknown
keys are preserved so the descriptor round-trips unmodified.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RekognitionModel(BaseModel):
    """Base for models decoded from Rekognition's PascalCase payloads."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class BoundingBox(RekognitionModel):
    """Face bounding box as ratios of the overall image size."""
    width: Optional[float] = Field(None, alias="Width", description="Width ratio of the box")
    height: Optional[float] = Field(None, alias="Height", description="Height ratio of the box")
    left: Optional[float] = Field(None, alias="Left", description="Left coordinate ratio")
    top: Optional[float] = Field(None, alias="Top", description="Top coordinate ratio")


class Landmark(RekognitionModel):
    """A facial landmark such as an eye or the nose."""
    type: Optional[str] = Field(None, alias="Type")
    x: Optional[float] = Field(None, alias="X")
    y: Optional[float] = Field(None, alias="Y")


class Pose(RekognitionModel):
    """Face orientation in degrees."""
    roll: Optional[float] = Field(None, alias="Roll")
    yaw: Optional[float] = Field(None, alias="Yaw")
    pitch: Optional[float] = Field(None, alias="Pitch")


class ImageQuality(RekognitionModel):
    """Brightness and sharpness of the detected face."""
    brightness: Optional[float] = Field(None, alias="Brightness")
    sharpness: Optional[float] = Field(None, alias="Sharpness")


class Emotion(RekognitionModel):
    type: Optional[str] = Field(None, alias="Type")
    confidence: Optional[float] = Field(None, alias="Confidence")


class Smile(RekognitionModel):
    value: Optional[bool] = Field(None, alias="Value")
    confidence: Optional[float] = Field(None, alias="Confidence")


class ComparedFace(RekognitionModel):
    """Face descriptor owned by Rekognition and passed through to callers."""
    bounding_box: Optional[BoundingBox] = Field(None, alias="BoundingBox")
    confidence: Optional[float] = Field(
        None, alias="Confidence", description="Confidence that the box contains a face (0-100)"
    )
    landmarks: Optional[List[Landmark]] = Field(None, alias="Landmarks")
    pose: Optional[Pose] = Field(None, alias="Pose")
    quality: Optional[ImageQuality] = Field(None, alias="Quality")
    emotions: Optional[List[Emotion]] = Field(None, alias="Emotions")
    smile: Optional[Smile] = Field(None, alias="Smile")


class ComparedSourceImageFace(RekognitionModel):
    """The face in the source image that was used for comparison."""
    bounding_box: Optional[BoundingBox] = Field(None, alias="BoundingBox")
    confidence: Optional[float] = Field(None, alias="Confidence")
