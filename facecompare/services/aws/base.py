"""Shared aioboto3 client handling for AWS services."""
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

import aioboto3

from facecompare.core.config import settings
from facecompare.core.logging import get_logger

logger = get_logger(__name__)


class AWSService:
    """Base class for services talking to a single AWS API through aioboto3."""

    service_name: str = ""

    def __init__(
        self,
        region_name: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        session: Optional[aioboto3.Session] = None,
    ):
        """Store configuration; clients are opened per call."""
        self.region_name = region_name or settings.AWS_REGION
        self.access_key_id = access_key_id or settings.AWS_ACCESS_KEY_ID
        self.secret_access_key = secret_access_key or settings.AWS_SECRET_ACCESS_KEY
        self._session = session or aioboto3.Session()

    def _client_args(self) -> dict:
        client_args = {"region_name": self.region_name or "us-east-1"}
        if self.access_key_id and self.secret_access_key:
            client_args["aws_access_key_id"] = self.access_key_id
            client_args["aws_secret_access_key"] = self.secret_access_key
        return client_args

    @asynccontextmanager
    async def _get_client(self) -> AsyncGenerator[Any, None]:
        """Async context manager yielding an aioboto3 client for ``service_name``."""
        logger.debug("Opening aioboto3 client", service=self.service_name)
        async with self._session.client(self.service_name, **self._client_args()) as client:
            yield client
