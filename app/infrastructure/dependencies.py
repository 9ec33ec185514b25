"""FastAPI dependency providers."""
from typing import AsyncGenerator

from fastapi import Depends

from app.core.container import ServiceContainer, container
from app.core.exceptions import ServiceNotInitializedError
from app.services.face_comparison import FaceComparisonService
from app.services.url_comparison import UrlComparisonService


async def get_container() -> ServiceContainer:
    """Dependency provider for the global ServiceContainer instance.

    Raises:
        ServiceNotInitializedError: If the application lifespan has not run
    """
    if not container.initialized:
        raise ServiceNotInitializedError("Service container is not initialized")
    return container


async def get_face_comparison_service(
    cont: ServiceContainer = Depends(get_container),
) -> AsyncGenerator[FaceComparisonService, None]:
    """Provide the face comparison service.

    Yields:
        FaceComparisonService: Initialized comparison service

    Raises:
        ServiceNotInitializedError: If service is not initialized
    """
    if cont.face_comparison_service is None:
        raise ServiceNotInitializedError("Face comparison service not initialized")
    yield cont.face_comparison_service


async def get_url_comparison_service(
    cont: ServiceContainer = Depends(get_container),
) -> AsyncGenerator[UrlComparisonService, None]:
    """Dependency provider for UrlComparisonService."""
    if cont.url_comparison_service is None:
        raise ServiceNotInitializedError("URL comparison service not initialized")
    yield cont.url_comparison_service
