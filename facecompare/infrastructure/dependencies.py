"""FastAPI dependency providers."""
from typing import AsyncGenerator

from fastapi import Depends

from facecompare.core.container import ServiceContainer, container
from facecompare.core.exceptions import ServiceNotInitializedError
from facecompare.services.comparison import ComparisonService
from facecompare.services.templates import TemplateService


async def get_container() -> ServiceContainer:
    """Dependency provider for the global ServiceContainer instance."""
    if not container.initialized:
        # Lifespan did not run (e.g. app mounted without it); initialize lazily
        try:
            await container.initialize()
        except Exception as e:
            raise ServiceNotInitializedError(f"Service container could not be initialized: {e}") from e
    return container


async def get_template_service(
    container: ServiceContainer = Depends(get_container),
) -> AsyncGenerator[TemplateService, None]:
    """Provide the template service.

    Yields:
        TemplateService: Initialized template service

    Raises:
        ServiceNotInitializedError: If the service is not initialized
    """
    if container.template_service is None:
        raise ServiceNotInitializedError("TemplateService not found in initialized container")
    yield container.template_service


async def get_comparison_service(
    container: ServiceContainer = Depends(get_container),
) -> AsyncGenerator[ComparisonService, None]:
    """Provide the batch comparison service."""
    if container.comparison_service is None:
        raise ServiceNotInitializedError("ComparisonService not found in initialized container")
    yield container.comparison_service
