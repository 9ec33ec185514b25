"""Shared fixtures for the face match tests."""
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from app.core.config import FaceComparisonConfig
from app.domain.interfaces.recognition import FaceComparisonClient
from app.domain.value_objects.recognition import CompareFacesResponse
from app.services.face_comparison import FaceComparisonService


def make_response(matches: Optional[List[Dict[str, Any]]] = None, **extra: Any) -> CompareFacesResponse:
    """Build a decoded CompareFaces response from Rekognition-shaped candidates."""
    payload: Dict[str, Any] = dict(extra)
    if matches is not None:
        payload["FaceMatches"] = matches
    return CompareFacesResponse.model_validate(payload)


@pytest.fixture
def comparison_config() -> FaceComparisonConfig:
    """Complete configuration pointing at a test bucket."""
    return FaceComparisonConfig(
        region="us-east-1",
        access_key_id="test-access-key",
        secret_access_key="test-secret-key",
        bucket="faces-bucket",
        similarity_threshold=98.0,
    )


@pytest.fixture
def comparison_client() -> AsyncMock:
    """Remote comparison client with no candidates by default."""
    client = AsyncMock(spec=FaceComparisonClient)
    client.compare_faces.return_value = make_response([])
    return client


@pytest.fixture
def comparison_service(comparison_config, comparison_client) -> FaceComparisonService:
    return FaceComparisonService(comparison_config, client=comparison_client)


@pytest.fixture
def response_factory():
    """Factory for decoded CompareFaces responses."""
    return make_response
