"""Face match API endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from app.api.models.face import (
    CombinedComparisonRequest,
    CombinedComparisonResponse,
    RawComparisonRequest,
    RawComparisonResponse,
)
from app.core.exceptions import (
    FetchError,
    InvalidImageReferenceError,
    RemoteServiceError,
)
from app.core.logging import get_logger
from app.infrastructure.dependencies import (
    get_face_comparison_service,
    get_url_comparison_service,
)
from app.services.face_comparison import FaceComparisonService
from app.services.url_comparison import UrlComparisonService

logger = get_logger(__name__)
router = APIRouter(
    tags=["face-match"],
    responses={
        400: {"description": "Invalid request"},
        500: {"description": "Internal server error"},
        502: {"description": "Upstream image or comparison service failed"},
    }
)


@router.post(
    "/raw",
    response_model=RawComparisonResponse,
    summary="Match two face images stored in S3",
    description="Compares a source image with a reference image, both addressed by S3 key.",
    responses={
        200: {
            "description": "Comparison completed",
            "content": {
                "application/json": {
                    "example": {
                        "has_match": True,
                        "score": 99.7,
                        "most_significant_match": {
                            "BoundingBox": {"Width": 0.32, "Height": 0.41, "Left": 0.3, "Top": 0.2},
                            "Confidence": 99.9,
                        },
                    }
                }
            },
        },
        502: {
            "description": "Rekognition failed",
            "content": {
                "application/json": {
                    "example": {"detail": "Unable to get object metadata from S3. Check object key, region and/or access permissions."}
                }
            },
        },
    },
)
async def match_raw(
    request: RawComparisonRequest,
    service: FaceComparisonService = Depends(get_face_comparison_service)
) -> RawComparisonResponse:
    """Compare two S3 images and return the normalized verdict.

    Raises:
        HTTPException: If the comparison fails
    """
    try:
        result = await service.compare_by_reference(request.src_image, request.reference_image)
        return RawComparisonResponse.from_match_result(result)

    except RemoteServiceError as e:
        logger.error("Face comparison failed", error=str(e), details=e.details)
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error("Unexpected error during face comparison",
                     error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/combined",
    response_model=CombinedComparisonResponse,
    summary="Compare faces using every input mode",
    description=(
        "Accepts two S3 image URLs and compares them three ways: by S3 reference, "
        "by downloaded bytes, and S3 source against target bytes."
    ),
    responses={
        400: {
            "description": "Invalid request",
            "content": {
                "application/json": {
                    "example": {"detail": "URL does not reference an object key: https://bucket.s3.amazonaws.com/"}
                }
            },
        },
        502: {
            "description": "Image download or Rekognition failed",
            "content": {
                "application/json": {
                    "example": {"detail": "Failed to download image from https://bucket.s3.amazonaws.com/a.jpg: 403 Client Error"}
                }
            },
        },
    },
)
async def match_combined(
    request: CombinedComparisonRequest,
    service: UrlComparisonService = Depends(get_url_comparison_service)
) -> CombinedComparisonResponse:
    """Compare two URL-addressed images in every input mode.

    Raises:
        HTTPException: If any step of the flow fails
    """
    try:
        result = await service.compare_urls(request.src_image_url, request.target_image_url)
        return CombinedComparisonResponse.from_service_response(result)

    except InvalidImageReferenceError as e:
        logger.warning("Invalid image URL", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except FetchError as e:
        logger.error("Failed to download image", error=str(e), details=e.details)
        raise HTTPException(status_code=502, detail=str(e))
    except RemoteServiceError as e:
        logger.error("Face comparison failed", error=str(e), details=e.details)
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error("Unexpected error during combined face comparison",
                     error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
