"""API specific template models.

Field aliases carry the wire names legacy clients send and expect.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from facecompare.domain.value_objects.comparison import ComparisonOutcome
from facecompare.domain.value_objects.template import StoredTemplate


class CreateTemplateRequest(BaseModel):
    """Request model for the /create_template endpoint.

    ``ImageData`` is left untyped so a wrong JSON type gets the field's own
    error message.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    image_data: Optional[Any] = Field(
        None, alias="ImageData",
        description="Base64 encoded image bytes"
    )
    bucket_name: Optional[Any] = Field(
        None, alias="bucketname",
        description="Accepted for compatibility; images are always stored in the configured bucket"
    )


class CompareListRequest(BaseModel):
    """Request model for the /compare_list endpoint.

    Fields are left untyped so that malformed values are reported with
    the endpoint's own error messages.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    single_template: Optional[Any] = Field(
        None, alias="SingleTemplate",
        description="Encoded reference template"
    )
    template_list: Optional[Any] = Field(
        None, alias="TemplateList",
        description="Encoded candidate templates; results follow this order"
    )


class TemplateListEntry(BaseModel):
    """API model for one stored template in the /get_list response."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="Name", description="S3 object key of the stored image")
    template: str = Field(..., alias="Template", description="Encoded template")

    @classmethod
    def from_stored(cls, stored: StoredTemplate) -> "TemplateListEntry":
        """Create an API entry from a domain StoredTemplate."""
        return cls(name=stored.name, template=stored.template.encode())


def scores_from_outcomes(outcomes: List[ComparisonOutcome]) -> List[Optional[float]]:
    """Flatten comparison outcomes into the response array; failed entries become None."""
    return [outcome.similarity if outcome.succeeded else None for outcome in outcomes]
