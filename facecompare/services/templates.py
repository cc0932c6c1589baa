"""Template service for storing uploaded images and listing stored templates."""
import base64
import binascii
import time
from typing import Any, Callable, List, Optional

from facecompare.core.config import settings
from facecompare.core.exceptions import InvalidInputError
from facecompare.core.logging import get_logger
from facecompare.domain.interfaces.storage.object_store import ObjectStore
from facecompare.domain.value_objects.template import ImageTemplate, StoredTemplate

logger = get_logger(__name__)

IMAGE_DATA_INVALID = "ImageData missing or invalid"


class TemplateService:
    """Service turning uploaded images into templates.

    Rekognition has no template format of its own; it compares images that
    live in S3. Creating a template therefore means storing the image under a
    timestamp key and handing back a reference to that object.

    Example:
        ```python
        service = TemplateService(S3Service())
        template = await service.create_template(image_data=b64_png)
        stored = await service.list_templates()
        ```
    """

    def __init__(
        self,
        object_store: ObjectStore,
        bucket: Optional[str] = None,
        key_suffix: Optional[str] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the template service.

        Args:
            object_store: Store the images are written to
            bucket: Bucket holding all templates (defaults to settings)
            key_suffix: Suffix of generated object keys (defaults to settings)
            clock: Source of the current time in seconds, used for key generation
        """
        self.object_store = object_store
        self.bucket = bucket or settings.TEMPLATE_BUCKET
        self.key_suffix = settings.TEMPLATE_KEY_SUFFIX if key_suffix is None else key_suffix
        self._clock = clock

    def _generate_key(self) -> str:
        # Millisecond resolution; two uploads in the same millisecond share a key.
        return f"{int(self._clock() * 1000)}{self.key_suffix}"

    async def create_template(
        self,
        image_data: Any,
        bucket_name: Optional[str] = None,
    ) -> ImageTemplate:
        """Store a base64 encoded image and return a template referencing it.

        Args:
            image_data: Base64 encoded image bytes, possibly line wrapped
            bucket_name: Bucket requested by the caller. Accepted for
                compatibility but not used; images always go to ``self.bucket``.

        Returns:
            ImageTemplate referencing the stored object

        Raises:
            InvalidInputError: If ``image_data`` is missing or not valid base64
            StorageError: If the object cannot be written
        """
        if not isinstance(image_data, str) or not image_data:
            raise InvalidInputError(IMAGE_DATA_INVALID)
        try:
            # Line breaks from MIME style encoders are not part of the payload
            image_bytes = base64.b64decode("".join(image_data.split()), validate=True)
        except (binascii.Error, ValueError) as e:
            logger.warning("Rejected undecodable image data", error=str(e))
            raise InvalidInputError(IMAGE_DATA_INVALID) from e
        if not image_bytes:
            raise InvalidInputError(IMAGE_DATA_INVALID)

        if bucket_name and bucket_name != self.bucket:
            logger.warning("Ignoring caller supplied bucket",
                           requested_bucket=bucket_name, bucket=self.bucket)

        key = self._generate_key()
        await self.object_store.put_object(self.bucket, key, image_bytes)
        logger.info("Created template", bucket=self.bucket, key=key)

        return ImageTemplate.for_object(self.bucket, key)

    async def list_templates(self) -> List[StoredTemplate]:
        """List every stored image as a named template.

        Returns:
            StoredTemplate entries in the order the store lists them

        Raises:
            StorageError: If the bucket cannot be listed
        """
        keys = await self.object_store.list_keys(self.bucket)
        logger.info("Listed templates", bucket=self.bucket, count=len(keys))
        return [
            StoredTemplate(name=key, template=ImageTemplate.for_object(self.bucket, key))
            for key in keys
        ]
