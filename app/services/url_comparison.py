"""Compare two URL-addressed images in every supported input mode."""
from typing import Optional

from app.core.config import settings
from app.core.logging import get_logger
from app.domain.value_objects.recognition import CombinedComparisonResult
from app.services.face_comparison import FaceComparisonService
from app.services.image_fetcher import ImageFetcher, object_key_from_url

logger = get_logger(__name__)


class UrlComparisonService:
    """Runs reference, bytes and mixed comparisons for a pair of S3 URLs.

    The comparisons run one after another. The first failure aborts the whole
    flow, there is no partial result.
    """

    def __init__(
        self,
        comparison_service: FaceComparisonService,
        image_fetcher: ImageFetcher,
        high_confidence_score: Optional[float] = None,
    ) -> None:
        """Initialize the URL comparison service.

        Args:
            comparison_service: Service performing the individual comparisons
            image_fetcher: Downloader used to turn URLs into inline bytes
            high_confidence_score: Reference score above which the result is flagged
        """
        self.comparison_service = comparison_service
        self.image_fetcher = image_fetcher
        self.high_confidence_score = (
            settings.HIGH_CONFIDENCE_SCORE if high_confidence_score is None else high_confidence_score
        )

    async def compare_urls(self, source_url: str, target_url: str) -> CombinedComparisonResult:
        """Compare the faces behind two S3 URLs.

        Args:
            source_url: URL of the source image, its path is the S3 key
            target_url: URL of the target image, its path is the S3 key

        Returns:
            CombinedComparisonResult with one MatchResult per input mode

        Raises:
            InvalidImageReferenceError: If a URL carries no object key
            FetchError: If an image cannot be downloaded
            RemoteServiceError: If any comparison fails
        """
        source_key = object_key_from_url(source_url)
        target_key = object_key_from_url(target_url)
        logger.info("Comparing faces by URL", source_key=source_key, target_key=target_key)

        # Download both images before any comparison is attempted
        source_image = await self.image_fetcher.fetch(source_url)
        target_image = await self.image_fetcher.fetch(target_url)

        # Sequential on purpose, the first failure aborts the whole flow
        reference_result = await self.comparison_service.compare_by_reference(source_key, target_key)
        bytes_result = await self.comparison_service.compare_by_bytes(
            source_image.data, target_image.data
        )
        mixed_result = await self.comparison_service.compare_mixed(source_key, target_image.data)

        return CombinedComparisonResult(
            reference_result=reference_result,
            bytes_result=bytes_result,
            mixed_result=mixed_result,
            high_confidence_match=reference_result.score > self.high_confidence_score,
        )
