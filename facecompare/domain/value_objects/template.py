"""Image template value objects.

A template is an opaque, transport-safe handle naming an image stored in S3.
On the wire it is the base64 encoding of a small JSON document shaped like the
``Image`` argument Rekognition accepts:

    {"S3Object":{"Bucket":"my-bucket","Name":"1700000000000.png"}}
"""
import base64
import binascii
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from facecompare.core.exceptions import InvalidTemplateError


class S3ObjectRef(BaseModel):
    """Location of an object in S3."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bucket: str = Field(..., alias="Bucket", min_length=1, description="S3 bucket name")
    name: str = Field(..., alias="Name", min_length=1, description="S3 object key")


class ImageTemplate(BaseModel):
    """Reference to a stored image usable by the face comparator."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    s3_object: S3ObjectRef = Field(..., alias="S3Object")

    @classmethod
    def for_object(cls, bucket: str, key: str) -> "ImageTemplate":
        """Build a template pointing at ``bucket/key``."""
        return cls(s3_object=S3ObjectRef(bucket=bucket, name=key))

    @property
    def bucket(self) -> str:
        return self.s3_object.bucket

    @property
    def key(self) -> str:
        return self.s3_object.name

    def to_rekognition_image(self) -> Dict[str, Any]:
        """Return the template in the shape of a Rekognition ``Image`` argument."""
        return self.model_dump(by_alias=True)

    def encode(self) -> str:
        """Encode the template as base64 text."""
        payload = self.model_dump_json(by_alias=True)
        return base64.b64encode(payload.encode("utf-8")).decode("ascii")

    @classmethod
    def decode(cls, encoded: Any) -> "ImageTemplate":
        """Decode base64 text produced by :meth:`encode`.

        Args:
            encoded: Encoded template, normally a string taken from a request body

        Returns:
            ImageTemplate: The decoded template

        Raises:
            InvalidTemplateError: If the value is not a string, not base64,
                or does not contain a template document
        """
        if not isinstance(encoded, str) or not encoded:
            raise InvalidTemplateError("Template must be a non-empty string")
        try:
            payload = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidTemplateError(f"Template is not valid base64: {e}") from e
        try:
            return cls.model_validate_json(payload)
        except ValidationError as e:
            raise InvalidTemplateError(
                "Template does not describe an S3 object",
                details={"errors": e.errors(include_url=False)},
            ) from e


class StoredTemplate(BaseModel):
    """An object found in the template bucket together with its template."""
    name: str = Field(..., description="S3 object key, used as a human readable name")
    template: ImageTemplate = Field(..., description="Template referencing the object")
