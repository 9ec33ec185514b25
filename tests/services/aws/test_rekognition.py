"""Tests for the Rekognition CompareFaces adapter."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, ParamValidationError
from pydantic import ValidationError

from app.core.exceptions import RemoteServiceError
from app.domain.value_objects.comparison import ComparisonRequest, InlineBytes, ObjectReference
from app.services.aws.rekognition import RekognitionService

COMPARE_FACES_RESPONSE = {
    "SourceImageFace": {
        "BoundingBox": {"Width": 0.3, "Height": 0.45, "Left": 0.33, "Top": 0.2},
        "Confidence": 99.99,
    },
    "FaceMatches": [
        {
            "Similarity": 99.3,
            "Face": {
                "BoundingBox": {"Width": 0.28, "Height": 0.41, "Left": 0.36, "Top": 0.22},
                "Confidence": 99.97,
                "Pose": {"Roll": -2.1, "Yaw": 4.7, "Pitch": 1.2},
                "Quality": {"Brightness": 77.4, "Sharpness": 89.9},
            },
        }
    ],
    "UnmatchedFaces": [],
    "ResponseMetadata": {"RequestId": "req-1", "HTTPStatusCode": 200, "RetryAttempts": 0},
}


@pytest.fixture
def rekognition_client():
    client = MagicMock()
    client.compare_faces = AsyncMock(return_value=COMPARE_FACES_RESPONSE)
    return client


@pytest.fixture
def session(rekognition_client):
    """aioboto3 session whose client context manager yields the fake client."""
    session = MagicMock()
    session.client.return_value.__aenter__.return_value = rekognition_client
    return session


@pytest.fixture
def service(comparison_config, session):
    return RekognitionService(comparison_config, session=session)


@pytest.fixture
def request_model():
    return ComparisonRequest(
        source_image=ObjectReference(bucket="faces-bucket", key="people/a.jpg"),
        target_image=InlineBytes(data=b"\xff\xd8\xff"),
        similarity_threshold=98.0,
    )


class TestRekognitionService:
    """CompareFaces invocation and response decoding."""

    async def test_sends_single_compare_faces_call(self, service, session, rekognition_client, request_model):
        await service.compare_faces(request_model)

        rekognition_client.compare_faces.assert_awaited_once_with(
            SourceImage={"S3Object": {"Bucket": "faces-bucket", "Name": "people/a.jpg"}},
            TargetImage={"Bytes": b"\xff\xd8\xff"},
            SimilarityThreshold=98.0,
            QualityFilter="HIGH",
        )
        session.client.assert_called_once()
        args, kwargs = session.client.call_args
        assert args == ("rekognition",)
        assert kwargs["region_name"] == "us-east-1"
        assert kwargs["aws_access_key_id"] == "test-access-key"
        assert kwargs["aws_secret_access_key"] == "test-secret-key"

    async def test_decodes_response(self, service, request_model):
        response = await service.compare_faces(request_model)

        assert response.source_image_face.confidence == 99.99
        assert len(response.face_matches) == 1
        match = response.face_matches[0]
        assert match.similarity == 99.3
        assert match.face.pose.yaw == 4.7
        assert response.unmatched_faces == []
        assert response.model_extra["ResponseMetadata"]["RequestId"] == "req-1"

    async def test_client_error_becomes_remote_service_error(self, service, rekognition_client, request_model):
        rekognition_client.compare_faces.side_effect = ClientError(
            {"Error": {"Code": "InvalidImageFormatException", "Message": "Request has invalid image format"}},
            "CompareFaces",
        )

        with pytest.raises(RemoteServiceError) as exc_info:
            await service.compare_faces(request_model)

        assert str(exc_info.value) == "Request has invalid image format"
        assert exc_info.value.details == {
            "error_code": "InvalidImageFormatException",
            "operation": "CompareFaces",
        }
        assert isinstance(exc_info.value.__cause__, ClientError)

    async def test_network_error_becomes_remote_service_error(self, service, rekognition_client, request_model):
        rekognition_client.compare_faces.side_effect = EndpointConnectionError(
            endpoint_url="https://rekognition.us-east-1.amazonaws.com"
        )

        with pytest.raises(RemoteServiceError) as exc_info:
            await service.compare_faces(request_model)

        assert "rekognition.us-east-1.amazonaws.com" in str(exc_info.value)
        assert exc_info.value.details["error_code"] == "EndpointConnectionError"
        assert rekognition_client.compare_faces.await_count == 1

    async def test_empty_bytes_rejected_by_parameter_validation(self, service, rekognition_client):
        """botocore rejects an empty payload before sending, which surfaces as RemoteServiceError."""
        empty_request = ComparisonRequest(
            source_image=ObjectReference(bucket="faces-bucket", key="people/a.jpg"),
            target_image=InlineBytes(data=b""),
            similarity_threshold=98.0,
        )
        rekognition_client.compare_faces.side_effect = ParamValidationError(
            report="Invalid length for parameter TargetImage.Bytes"
        )

        with pytest.raises(RemoteServiceError) as exc_info:
            await service.compare_faces(empty_request)

        assert "TargetImage.Bytes" in str(exc_info.value)
        assert exc_info.value.details["error_code"] == "ParamValidationError"
        assert isinstance(exc_info.value.__cause__, ParamValidationError)
        rekognition_client.compare_faces.assert_awaited_once()
        assert rekognition_client.compare_faces.await_args.kwargs["TargetImage"] == {"Bytes": b""}

    async def test_malformed_response_becomes_remote_service_error(
        self, service, rekognition_client, request_model
    ):
        rekognition_client.compare_faces.return_value = {"FaceMatches": [{"Similarity": "not-a-number"}]}

        with pytest.raises(RemoteServiceError) as exc_info:
            await service.compare_faces(request_model)

        assert exc_info.value.details == {"operation": "CompareFaces"}
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_client_config_disables_retries_by_default(self, service):
        client_config = service._client_args()["config"]

        assert client_config.retries == {"max_attempts": 1, "mode": "standard"}
        assert client_config.connect_timeout == 5.0
        assert client_config.read_timeout == 30.0
