"""
Rekognition service for pairwise face comparison using aioboto3.
"""
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from facecompare.core.config import settings
from facecompare.core.exceptions import ComparatorError
from facecompare.core.logging import get_logger
from facecompare.domain.interfaces.recognition.face_comparator import FaceComparator
from facecompare.domain.value_objects.template import ImageTemplate
from facecompare.services.aws.base import AWSService

logger = get_logger(__name__)


class RekognitionService(AWSService, FaceComparator):
    """Compare faces of two S3-stored images with ``CompareFaces``.

    Rekognition reads both images straight from S3, so the templates are
    passed through as ``Image`` arguments without downloading anything.
    """

    service_name = "rekognition"

    def __init__(self, similarity_threshold: Optional[float] = None, **kwargs):
        super().__init__(**kwargs)
        self.similarity_threshold = (
            settings.SIMILARITY_THRESHOLD if similarity_threshold is None else similarity_threshold
        )

    async def compare(self, source: ImageTemplate, target: ImageTemplate) -> Optional[float]:
        """Return the best match similarity (0-100), or None when nothing matched."""
        try:
            async with self._get_client() as rekognition:
                response = await rekognition.compare_faces(
                    SourceImage=source.to_rekognition_image(),
                    TargetImage=target.to_rekognition_image(),
                    SimilarityThreshold=self.similarity_threshold,
                )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            logger.error("Rekognition rejected face comparison",
                         source=source.key, target=target.key,
                         error_code=error_code, error=str(e))
            raise ComparatorError(
                f"Face comparison failed: {error_code or e}",
                details={"source": source.key, "target": target.key, "code": error_code}) from e
        except BotoCoreError as e:
            logger.error("Unexpected error calling Rekognition",
                         source=source.key, target=target.key, error=str(e), exc_info=True)
            raise ComparatorError(
                f"Face comparison failed: {e}",
                details={"source": source.key, "target": target.key}) from e

        matches = response.get("FaceMatches", [])
        if not matches:
            logger.debug("No face matches", source=source.key, target=target.key)
            return None

        best = max(match["Similarity"] for match in matches)
        logger.debug("Face comparison complete", source=source.key, target=target.key,
                     matches=len(matches), similarity=best)
        return best
