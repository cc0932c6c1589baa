"""Service container for dependency injection."""
from typing import Optional

from facecompare.domain.interfaces.recognition.face_comparator import FaceComparator
from facecompare.domain.interfaces.storage.object_store import ObjectStore
from facecompare.services.aws.rekognition import RekognitionService
from facecompare.services.aws.s3 import S3Service
from facecompare.services.comparison import ComparisonService
from facecompare.services.templates import TemplateService


class ServiceContainer:
    """Container for application services.

    Holds the explicitly constructed AWS clients and the services built on
    them. Tests replace the clients by passing their own implementations to
    :meth:`initialize`.

    Example:
        ```python
        container = ServiceContainer()
        await container.initialize()

        templates = container.template_service
        comparison = container.comparison_service
        ```
    """

    def __init__(self) -> None:
        """Initialize empty container."""
        self.object_store: Optional[ObjectStore] = None
        self.face_comparator: Optional[FaceComparator] = None

        self.template_service: Optional[TemplateService] = None
        self.comparison_service: Optional[ComparisonService] = None

    @property
    def initialized(self) -> bool:
        return self.template_service is not None and self.comparison_service is not None

    async def initialize(
        self,
        object_store: Optional[ObjectStore] = None,
        face_comparator: Optional[FaceComparator] = None,
    ) -> None:
        """Initialize all services in the correct order."""
        self.object_store = object_store or S3Service()
        self.face_comparator = face_comparator or RekognitionService()
        self.template_service = TemplateService(object_store=self.object_store)
        self.comparison_service = ComparisonService(comparator=self.face_comparator)

    async def cleanup(self) -> None:
        """Cleanup all services in reverse order of initialization."""
        self.comparison_service = None
        self.template_service = None
        # aioboto3 clients are closed by their own context managers
        self.face_comparator = None
        self.object_store = None


# Global container instance
container = ServiceContainer()
