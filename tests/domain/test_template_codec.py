"""Tests for the template value object and its transport encoding."""
import base64
import json

import pytest

from facecompare.core.exceptions import InvalidInputError, InvalidTemplateError
from facecompare.domain.value_objects.template import ImageTemplate


class TestImageTemplate:
    """Test suite for template encoding and decoding."""

    def test_encode_produces_compact_s3_object_document(self):
        """Should encode the same JSON document the legacy service produced."""
        template = ImageTemplate.for_object("mw-dhs-code-assessment", "1700000000500.png")

        payload = base64.b64decode(template.encode()).decode("utf-8")

        assert payload == '{"S3Object":{"Bucket":"mw-dhs-code-assessment","Name":"1700000000500.png"}}'

    def test_decode_accepts_legacy_encoded_template(self):
        """Should decode a template encoded by another client."""
        document = {"S3Object": {"Bucket": "bucket-a", "Name": "face.png"}}
        encoded = base64.b64encode(json.dumps(document).encode("utf-8")).decode("ascii")

        template = ImageTemplate.decode(encoded)

        assert template.bucket == "bucket-a"
        assert template.key == "face.png"

    def test_decode_returns_written_location(self):
        """A template fed back in names the same bucket and key."""
        original = ImageTemplate.for_object("bucket-b", "1.png")

        assert ImageTemplate.decode(original.encode()) == original

    def test_rekognition_image_shape(self):
        """Should be usable directly as a Rekognition Image argument."""
        template = ImageTemplate.for_object("bucket-c", "k.png")

        assert template.to_rekognition_image() == {
            "S3Object": {"Bucket": "bucket-c", "Name": "k.png"}
        }

    @pytest.mark.parametrize("value", [
        None,
        "",
        42,
        ["not", "a", "string"],
        "%%% not base64 %%%",
        base64.b64encode(b"not json").decode(),
        base64.b64encode(b'{"S3Object": {"Bucket": "b"}}').decode(),
        base64.b64encode(b'{"Bucket": "b", "Name": "k"}').decode(),
        base64.b64encode(b"\xff\xfe\x00").decode(),
    ])
    def test_decode_rejects_malformed_values(self, value):
        """Should raise InvalidTemplateError for anything that is not a template."""
        with pytest.raises(InvalidTemplateError):
            ImageTemplate.decode(value)

    def test_decode_error_is_invalid_input(self):
        """Template errors are reported to callers as invalid input."""
        with pytest.raises(InvalidInputError):
            ImageTemplate.decode("@@@")
