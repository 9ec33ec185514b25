"""
Rekognition service for face comparison using aioboto3.
"""
from typing import Any, Dict, Optional

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from app.core.config import FaceComparisonConfig
from app.core.exceptions import RemoteServiceError
from app.core.logging import get_logger
from app.domain.interfaces.recognition import FaceComparisonClient
from app.domain.value_objects.comparison import ComparisonRequest
from app.domain.value_objects.recognition import CompareFacesResponse

logger = get_logger(__name__)


class RekognitionService(FaceComparisonClient):
    """Service for comparing faces with AWS Rekognition using aioboto3.

    A client is opened per call, so one instance can be shared by concurrent
    requests.
    """

    def __init__(
        self,
        config: FaceComparisonConfig,
        session: Optional[aioboto3.Session] = None,
    ):
        """Store configuration but do not open a client yet.

        Args:
            config: Region, credentials and client timeouts
            session: Optional aioboto3 session, a new one is created if omitted
        """
        self.region_name = config.region
        self.access_key_id = config.access_key_id
        self.secret_access_key = config.secret_access_key
        self._client_config = Config(
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            retries={"max_attempts": config.max_attempts, "mode": "standard"},
        )
        self._session = session or aioboto3.Session()

    def _client_args(self) -> Dict[str, Any]:
        client_args: Dict[str, Any] = {
            "region_name": self.region_name,
            "config": self._client_config,
        }
        if self.access_key_id and self.secret_access_key:
            logger.debug("Using explicit AWS credentials from config for aioboto3")
            client_args["aws_access_key_id"] = self.access_key_id
            client_args["aws_secret_access_key"] = self.secret_access_key
        return client_args

    async def compare_faces(self, request: ComparisonRequest) -> CompareFacesResponse:
        """
        Send a single CompareFaces call.

        Args:
            request: Comparison request with both images, threshold and quality filter

        Returns:
            The decoded CompareFaces response

        Raises:
            RemoteServiceError: If Rekognition rejects the call or cannot be reached
        """
        try:
            # Client is scoped to this call so concurrent requests never share one
            async with self._session.client("rekognition", **self._client_args()) as rekognition:
                response = await rekognition.compare_faces(**request.to_api_params())
        except ClientError as e:
            # Rekognition puts the code and a readable message under "Error"
            error = e.response.get("Error", {})
            error_code = error.get("Code")
            logger.error(
                "Rekognition rejected CompareFaces call",
                error_code=error_code,
                error=str(e),
            )
            raise RemoteServiceError(
                error.get("Message") or str(e),
                details={"error_code": error_code, "operation": "CompareFaces"},
            ) from e
        except BotoCoreError as e:
            # Connection failures, timeouts and parameter validation
            logger.error("Failed to reach Rekognition", error=str(e), exc_info=True)
            raise RemoteServiceError(
                str(e),
                details={"error_code": type(e).__name__, "operation": "CompareFaces"},
            ) from e

        logger.debug(
            "CompareFaces call completed",
            matches_count=len(response.get("FaceMatches") or []),
        )

        # Decode once here, everything downstream works on the typed response
        try:
            return CompareFacesResponse.model_validate(response)
        except ValidationError as e:
            logger.error("Unexpected CompareFaces response shape", error=str(e))
            raise RemoteServiceError(
                f"Unexpected CompareFaces response: {e}",
                details={"operation": "CompareFaces"},
            ) from e
