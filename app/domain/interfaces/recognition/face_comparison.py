"""Face comparison client interface."""
from abc import ABC, abstractmethod

from ...value_objects.comparison import ComparisonRequest
from ...value_objects.recognition import CompareFacesResponse


class FaceComparisonClient(ABC):
    """Interface for a remote face comparison capability."""

    @abstractmethod
    async def compare_faces(self, request: ComparisonRequest) -> CompareFacesResponse:
        """
        Compare the face in the source image with faces in the target image.

        Issues exactly one remote call and performs no retries.

        Args:
            request: Source and target images plus threshold and quality filter

        Returns:
            CompareFacesResponse with zero or more ranked candidates

        Raises:
            RemoteServiceError: If the remote call fails for any reason
        """
        pass
