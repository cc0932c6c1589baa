"""Shared fixtures: in-memory stand-ins for S3 and Rekognition."""
import asyncio
from typing import Dict, List, Optional, Tuple, Union

import pytest
from fastapi.testclient import TestClient

from facecompare.domain.interfaces.recognition.face_comparator import FaceComparator
from facecompare.domain.interfaces.storage.object_store import ObjectStore
from facecompare.domain.value_objects.template import ImageTemplate
from facecompare.infrastructure.dependencies import get_comparison_service, get_template_service
from facecompare.main import app
from facecompare.services.comparison import ComparisonService
from facecompare.services.templates import TemplateService

TEST_BUCKET = "test-templates"
# Half a second keeps the millisecond key exact in binary floating point
FIXED_TIME = 1700000000.5
FIXED_KEY = "1700000000500.png"


class InMemoryObjectStore(ObjectStore):
    """Object store keeping buckets in insertion-ordered dicts."""

    def __init__(self) -> None:
        self.buckets: Dict[str, Dict[str, bytes]] = {}
        self.puts: List[Tuple[str, str]] = []
        self.fail_with: Optional[Exception] = None

    async def put_object(self, bucket: str, key: str, body: bytes) -> None:
        if self.fail_with:
            raise self.fail_with
        self.buckets.setdefault(bucket, {})[key] = body
        self.puts.append((bucket, key))

    async def list_keys(self, bucket: str) -> List[str]:
        if self.fail_with:
            raise self.fail_with
        return list(self.buckets.get(bucket, {}))


class ScriptedComparator(FaceComparator):
    """Comparator answering from a table keyed by target object key.

    A value of None means no match; an exception instance is raised.
    Tracks call order and how many calls overlapped.
    """

    def __init__(self, results: Optional[Dict[str, Union[float, None, Exception]]] = None) -> None:
        self.results = results or {}
        self.calls: List[Tuple[str, str]] = []
        self._in_flight = 0
        self.max_in_flight = 0

    async def compare(self, source: ImageTemplate, target: ImageTemplate) -> Optional[float]:
        self._in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self._in_flight)
        try:
            await asyncio.sleep(0)
            self.calls.append((source.key, target.key))
            result = self.results.get(target.key)
            if isinstance(result, Exception):
                raise result
            return result
        finally:
            self._in_flight -= 1


def encoded(key: str, bucket: str = TEST_BUCKET) -> str:
    """Encoded template for ``bucket/key``."""
    return ImageTemplate.for_object(bucket, key).encode()


@pytest.fixture
def object_store() -> InMemoryObjectStore:
    return InMemoryObjectStore()


@pytest.fixture
def comparator() -> ScriptedComparator:
    return ScriptedComparator()


@pytest.fixture
def template_service(object_store) -> TemplateService:
    return TemplateService(
        object_store,
        bucket=TEST_BUCKET,
        key_suffix=".png",
        clock=lambda: FIXED_TIME,
    )


@pytest.fixture
def comparison_service(comparator) -> ComparisonService:
    return ComparisonService(comparator)


@pytest.fixture
def client(template_service, comparison_service):
    """HTTP client with the AWS-backed services replaced by the fakes above."""
    app.dependency_overrides[get_template_service] = lambda: template_service
    app.dependency_overrides[get_comparison_service] = lambda: comparison_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def bucket() -> str:
    return TEST_BUCKET


@pytest.fixture
def fixed_key() -> str:
    """Key the template service generates under the frozen clock."""
    return FIXED_KEY


@pytest.fixture
def make_template():
    """Factory producing encoded templates in the test bucket."""
    return encoded
