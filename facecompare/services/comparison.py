"""Batch comparison service for scoring one template against a list of templates."""
from typing import Any, List, Optional

from facecompare.core.exceptions import ComparatorError, InvalidInputError, InvalidTemplateError
from facecompare.core.logging import get_logger
from facecompare.domain.interfaces.recognition.face_comparator import FaceComparator
from facecompare.domain.value_objects.comparison import ComparisonOutcome
from facecompare.domain.value_objects.template import ImageTemplate

logger = get_logger(__name__)

TEMPLATE_LIST_MISSING = "Request is not properly formated. TemplateList parameter is missing"
SINGLE_TEMPLATE_INVALID = "SingleTemplate missing or invalid"
TEMPLATE_LIST_INVALID = "TemplateList missing or invalid"


def normalize_similarity(similarity: Optional[float]) -> float:
    """Convert a comparator percentage to [0, 1]; no match becomes 0."""
    if similarity is None:
        return 0.0
    return similarity / 100


class ComparisonService:
    """Service comparing a reference template with an ordered list of candidates.

    Comparisons are issued one at a time, in list order; the next call is only
    made after the previous one has completed. A failed comparison does not
    stop the batch, it is recorded as a failed outcome at its index so that
    results always line up with the candidate list.

    Example:
        ```python
        service = ComparisonService(RekognitionService())
        outcomes = await service.compare_list(reference, [candidate_a, candidate_b])
        ```
    """

    def __init__(self, comparator: FaceComparator) -> None:
        """Initialize the comparison service.

        Args:
            comparator: Pairwise face comparator
        """
        self.comparator = comparator

    async def compare_list(
        self,
        single_template: Any,
        template_list: Any,
    ) -> List[ComparisonOutcome]:
        """Compare ``single_template`` with every entry of ``template_list``.

        Args:
            single_template: Encoded reference template
            template_list: Encoded candidate templates, order significant

        Returns:
            One ComparisonOutcome per candidate, in candidate order

        Raises:
            InvalidInputError: If the list is missing, empty or not a list, the
                reference cannot be decoded, or any candidate cannot be decoded.
                In the last case results collected so far are discarded.
        """
        if not template_list:
            raise InvalidInputError(TEMPLATE_LIST_MISSING)
        if not isinstance(template_list, (list, tuple)):
            raise InvalidInputError(TEMPLATE_LIST_INVALID)

        try:
            source = ImageTemplate.decode(single_template)
        except InvalidTemplateError as e:
            logger.warning("Invalid reference template", error=str(e))
            raise InvalidInputError(SINGLE_TEMPLATE_INVALID) from e

        logger.info("Starting batch comparison", source=source.key, candidates=len(template_list))

        outcomes: List[ComparisonOutcome] = []
        for index, encoded in enumerate(template_list):
            try:
                target = ImageTemplate.decode(encoded)
            except InvalidTemplateError as e:
                logger.warning("Invalid candidate template, aborting batch",
                               index=index, completed=len(outcomes), error=str(e))
                raise InvalidInputError(TEMPLATE_LIST_INVALID) from e

            try:
                similarity = await self.comparator.compare(source, target)
            except ComparatorError as e:
                logger.warning("Comparison failed, continuing with next candidate",
                               index=index, target=target.key, error=str(e))
                outcomes.append(ComparisonOutcome.failed(index, str(e)))
                continue

            outcomes.append(ComparisonOutcome.ok(index, normalize_similarity(similarity)))

        failed = sum(1 for outcome in outcomes if not outcome.succeeded)
        logger.info("Finished batch comparison", source=source.key,
                    candidates=len(outcomes), failed=failed)
        return outcomes
