"""Face comparator interface."""
from abc import ABC, abstractmethod
from typing import Optional

from ...value_objects.template import ImageTemplate


class FaceComparator(ABC):
    """Interface for pairwise face comparison."""

    @abstractmethod
    async def compare(
        self,
        source: ImageTemplate,
        target: ImageTemplate,
    ) -> Optional[float]:
        """
        Compare the face in ``source`` with faces in ``target``.

        Args:
            source: Template of the reference image
            target: Template of the candidate image

        Returns:
            The best match similarity as a percentage (0-100), or None when
            no face in the target matched.

        Raises:
            ComparatorError: If the comparison call fails
        """
        pass
