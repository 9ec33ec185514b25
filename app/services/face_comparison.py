"""Face comparison service for matching two images with Rekognition."""
from typing import Optional

from app.core.config import FaceComparisonConfig
from app.core.logging import get_logger
from app.domain.interfaces.recognition import FaceComparisonClient
from app.domain.value_objects.comparison import (
    ComparisonRequest,
    ImageSource,
    InlineBytes,
    ObjectReference,
)
from app.domain.value_objects.recognition import MatchResult
from app.services.aws.rekognition import RekognitionService
from app.services.result_normalizer import normalize

logger = get_logger(__name__)


class FaceComparisonService:
    """Service for comparing the faces in two images.

    Images can be addressed as S3 objects in the configured bucket or passed as
    raw bytes. Every operation uses the similarity threshold and quality filter
    fixed in the configuration, issues exactly one Rekognition call and lets
    any failure propagate to the caller.

    Example:
        ```python
        config = FaceComparisonConfig.from_settings(settings)
        comparer = FaceComparisonService(config)

        result = await comparer.compare_by_reference("people/a.jpg", "people/b.jpg")
        if result.has_match:
            print(result.score)
        ```
    """

    def __init__(
        self,
        config: FaceComparisonConfig,
        client: Optional[FaceComparisonClient] = None,
    ) -> None:
        """Initialize the face comparison service.

        Args:
            config: Region, credentials, default bucket and similarity threshold
            client: Remote comparison client, a RekognitionService is built if omitted

        Raises:
            ConfigurationError: If credentials, region or bucket are missing
        """
        config.require_complete()
        self.config = config
        self.client = client or RekognitionService(config)

    @property
    def similarity_threshold(self) -> float:
        return self.config.similarity_threshold

    async def compare_by_reference(self, source_key: str, target_key: str) -> MatchResult:
        """Compare two images stored in the configured S3 bucket.

        Args:
            source_key: S3 object key of the source image
            target_key: S3 object key of the target image

        Returns:
            MatchResult of the comparison

        Raises:
            RemoteServiceError: If Rekognition fails, e.g. an object does not exist
        """
        return await self._compare(
            self._reference(source_key),
            self._reference(target_key),
        )

    async def compare_by_bytes(self, source_bytes: bytes, target_bytes: bytes) -> MatchResult:
        """Compare two images passed as raw bytes.

        Raises:
            RemoteServiceError: If Rekognition fails, e.g. an image cannot be decoded
        """
        return await self._compare(InlineBytes(data=source_bytes), InlineBytes(data=target_bytes))

    async def compare_mixed(self, source_key: str, target_bytes: bytes) -> MatchResult:
        """Compare an image in S3 with an image passed as raw bytes.

        Raises:
            RemoteServiceError: If Rekognition fails
        """
        return await self._compare(self._reference(source_key), InlineBytes(data=target_bytes))

    def _reference(self, key: str) -> ObjectReference:
        return ObjectReference(bucket=self.config.bucket, key=key)

    def build_request(self, source: ImageSource, target: ImageSource) -> ComparisonRequest:
        """Build the CompareFaces request for any combination of image variants."""
        return ComparisonRequest(
            source_image=source,
            target_image=target,
            similarity_threshold=self.config.similarity_threshold,
            quality_filter=self.config.quality_filter,
        )

    async def _compare(self, source: ImageSource, target: ImageSource) -> MatchResult:
        request = self.build_request(source, target)
        logger.info(
            "Comparing faces",
            source_type=type(source).__name__,
            target_type=type(target).__name__,
            threshold=request.similarity_threshold,
            quality_filter=request.quality_filter.value,
        )

        # Exactly one remote call, failures propagate to the caller untouched
        response = await self.client.compare_faces(request)
        result = normalize(response)

        logger.info("Face comparison completed", has_match=result.has_match, score=result.score)
        return result
