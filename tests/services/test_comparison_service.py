"""Tests for the batch comparison sequencer."""
import pytest

from facecompare.core.exceptions import ComparatorError, InvalidInputError
from facecompare.services.comparison import (
    SINGLE_TEMPLATE_INVALID,
    TEMPLATE_LIST_INVALID,
    TEMPLATE_LIST_MISSING,
    normalize_similarity,
)


class TestComparisonService:
    """Test suite for ComparisonService.compare_list."""

    @pytest.mark.parametrize("template_list", [None, []])
    @pytest.mark.asyncio
    async def test_missing_list_makes_no_calls(self, comparison_service, comparator, make_template, template_list):
        """Should reject a missing or empty list before any comparison."""
        with pytest.raises(InvalidInputError) as exc_info:
            await comparison_service.compare_list(make_template("ref.png"), template_list)

        assert str(exc_info.value) == TEMPLATE_LIST_MISSING
        assert comparator.calls == []

    @pytest.mark.parametrize("single_template", [None, "", "garbage!"])
    @pytest.mark.asyncio
    async def test_invalid_reference(self, comparison_service, comparator, make_template, single_template):
        """Should reject an undecodable reference template."""
        with pytest.raises(InvalidInputError) as exc_info:
            await comparison_service.compare_list(single_template, [make_template("a.png")])

        assert str(exc_info.value) == SINGLE_TEMPLATE_INVALID
        assert comparator.calls == []

    @pytest.mark.asyncio
    async def test_match_and_no_match(self, comparison_service, comparator, make_template):
        """A reported similarity of 87 becomes 0.87; no match becomes 0."""
        comparator.results = {"a.png": 87.0, "b.png": None}

        outcomes = await comparison_service.compare_list(
            make_template("ref.png"), [make_template("a.png"), make_template("b.png")]
        )

        assert [outcome.similarity for outcome in outcomes] == [0.87, 0]
        assert all(outcome.succeeded for outcome in outcomes)

    @pytest.mark.asyncio
    async def test_calls_are_sequential_and_ordered(self, comparison_service, comparator, make_template):
        """Comparisons run one at a time in ascending index order."""
        keys = [f"{i}.png" for i in range(6)]
        comparator.results = {key: float(10 * i) for i, key in enumerate(keys)}

        outcomes = await comparison_service.compare_list(
            make_template("ref.png"), [make_template(key) for key in keys]
        )

        assert comparator.calls == [("ref.png", key) for key in keys]
        assert comparator.max_in_flight == 1
        assert [outcome.index for outcome in outcomes] == list(range(6))
        assert [outcome.similarity for outcome in outcomes] == [i / 10 for i in range(6)]

    @pytest.mark.asyncio
    async def test_duplicates_are_compared_each_time(self, comparison_service, comparator, make_template):
        """The list is not deduplicated."""
        comparator.results = {"a.png": 50.0}

        outcomes = await comparison_service.compare_list(
            make_template("ref.png"), [make_template("a.png")] * 3
        )

        assert len(comparator.calls) == 3
        assert [outcome.similarity for outcome in outcomes] == [0.5, 0.5, 0.5]

    @pytest.mark.asyncio
    async def test_comparator_failure_keeps_index_alignment(self, comparison_service, comparator, make_template):
        """A failed comparison is recorded at its index and the batch continues."""
        comparator.results = {
            "a.png": 90.0,
            "b.png": ComparatorError("InvalidParameterException"),
            "c.png": 40.0,
        }

        outcomes = await comparison_service.compare_list(
            make_template("ref.png"),
            [make_template("a.png"), make_template("b.png"), make_template("c.png")],
        )

        assert len(outcomes) == 3
        assert outcomes[0].similarity == 0.9
        assert not outcomes[1].succeeded
        assert "InvalidParameterException" in outcomes[1].error
        assert outcomes[2].similarity == 0.4
        assert len(comparator.calls) == 3

    @pytest.mark.asyncio
    async def test_invalid_candidate_aborts_batch(self, comparison_service, comparator, make_template):
        """An undecodable candidate fails the whole batch and stops further calls."""
        comparator.results = {"a.png": 90.0, "c.png": 40.0}

        with pytest.raises(InvalidInputError) as exc_info:
            await comparison_service.compare_list(
                make_template("ref.png"),
                [make_template("a.png"), "not-a-template", make_template("c.png")],
            )

        assert str(exc_info.value) == TEMPLATE_LIST_INVALID
        assert comparator.calls == [("ref.png", "a.png")]

    @pytest.mark.parametrize("template_list", ["abc", {"0": "x"}, 7])
    @pytest.mark.asyncio
    async def test_non_list_is_invalid(self, comparison_service, comparator, make_template, template_list):
        """A list field holding something other than a list is invalid input."""
        with pytest.raises(InvalidInputError) as exc_info:
            await comparison_service.compare_list(make_template("ref.png"), template_list)

        assert str(exc_info.value) == TEMPLATE_LIST_INVALID
        assert comparator.calls == []


@pytest.mark.parametrize("similarity, expected", [
    (None, 0.0),
    (0.0, 0.0),
    (100.0, 1.0),
    (99.5, 0.995),
])
def test_normalize_similarity(similarity, expected):
    assert normalize_similarity(similarity) == pytest.approx(expected)
