"""Service container for dependency injection."""
from typing import Optional

from app.core.config import FaceComparisonConfig, Settings, settings
from app.services.face_comparison import FaceComparisonService
from app.services.image_fetcher import ImageFetcher
from app.services.url_comparison import UrlComparisonService


class ServiceContainer:
    """Container for application services.

    This container manages the lifecycle and dependencies of all services in the application.
    Configuration is validated when the container initializes, so a missing
    credential stops the application at startup rather than on the first request.

    Example:
        ```python
        container = ServiceContainer()
        await container.initialize()

        comparer = container.face_comparison_service
        ```
    """

    def __init__(self) -> None:
        """Initialize empty container."""
        self.image_fetcher: Optional[ImageFetcher] = None
        self.face_comparison_service: Optional[FaceComparisonService] = None
        self.url_comparison_service: Optional[UrlComparisonService] = None

    @property
    def initialized(self) -> bool:
        return self.face_comparison_service is not None

    async def initialize(self, app_settings: Optional[Settings] = None) -> None:
        """Initialize all services in the correct order.

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        app_settings = app_settings or settings
        config = FaceComparisonConfig.from_settings(app_settings)

        self.image_fetcher = ImageFetcher(timeout=app_settings.IMAGE_FETCH_TIMEOUT)
        self.face_comparison_service = FaceComparisonService(config)
        self.url_comparison_service = UrlComparisonService(
            comparison_service=self.face_comparison_service,
            image_fetcher=self.image_fetcher,
            high_confidence_score=app_settings.HIGH_CONFIDENCE_SCORE,
        )

    async def cleanup(self) -> None:
        """Cleanup all services in reverse order of initialization."""
        # Rekognition clients are opened per call, nothing to close here
        self.url_comparison_service = None
        self.face_comparison_service = None
        self.image_fetcher = None


# Global container instance
container = ServiceContainer()
