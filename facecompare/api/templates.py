"""Template and comparison API endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from facecompare.api.models.template import (
    CompareListRequest,
    CreateTemplateRequest,
    TemplateListEntry,
    scores_from_outcomes,
)
from facecompare.api.responses import error_reply, reply
from facecompare.core.exceptions import InvalidInputError, StorageError
from facecompare.core.logging import get_logger
from facecompare.infrastructure.dependencies import (
    get_comparison_service,
    get_template_service,
)
from facecompare.services.comparison import ComparisonService
from facecompare.services.info import AlgorithmInfo, get_algorithm_info
from facecompare.services.templates import TemplateService

logger = get_logger(__name__)
router = APIRouter(
    responses={
        400: {"description": "Invalid request"},
        500: {"description": "Internal server error"}
    }
)

UNEXPECTED_ERROR = "An unexpected error occurred"


@router.post(
    "/create_template",
    response_model=str,
    summary="Create a template from an image",
    description="Stores a base64 encoded image in S3 and returns an encoded template referencing it.",
    responses={
        200: {
            "description": "Template created",
            "content": {
                "application/json": {
                    "example": "eyJTM09iamVjdCI6eyJCdWNrZXQiOiJidWNrZXQiLCJOYW1lIjoiMTcwMDAwMDAwMDAwMC5wbmcifX0="
                }
            },
        },
        400: {
            "description": "Invalid request",
            "content": {"application/json": {"example": "ImageData missing or invalid"}},
        },
        502: {
            "description": "Object store failure",
            "content": {"application/json": {"example": "Failed to store image"}},
        },
    },
)
async def create_template(
    request: CreateTemplateRequest,
    service: TemplateService = Depends(get_template_service)
) -> JSONResponse:
    """Store an image and return its template.

    Args:
        request: Request carrying the base64 encoded image
        service: Template service provided by dependency injection

    Returns:
        JSON string with the encoded template
    """
    try:
        template = await service.create_template(
            image_data=request.image_data,
            bucket_name=request.bucket_name,
        )
        return reply(template.encode())

    except InvalidInputError as e:
        return error_reply(e.message)
    except StorageError as e:
        logger.error("Failed to store image", error=str(e), details=e.details)
        return error_reply("Failed to store image", status_code=502)
    except Exception as e:
        logger.error("Unexpected error creating template", error=str(e), exc_info=True)
        return error_reply(UNEXPECTED_ERROR, status_code=500)


@router.post(
    "/compare_list",
    response_model=List[Optional[float]],
    summary="Compare one template with a list of templates",
    description=(
        "Returns one normalized similarity (0.0 to 1.0) per entry of TemplateList, in the same order. "
        "0 means no match; null marks a comparison that failed."
    ),
    responses={
        200: {
            "description": "Similarities computed",
            "content": {"application/json": {"example": [0.87, 0]}},
        },
        400: {
            "description": "Invalid request",
            "content": {"application/json": {"example": "SingleTemplate missing or invalid"}},
        },
    },
)
async def compare_list(
    request: CompareListRequest,
    service: ComparisonService = Depends(get_comparison_service)
) -> JSONResponse:
    """Compare a reference template with an ordered list of templates.

    Args:
        request: Request carrying the reference and candidate templates
        service: Comparison service provided by dependency injection

    Returns:
        JSON array of similarities in candidate order
    """
    try:
        outcomes = await service.compare_list(
            single_template=request.single_template,
            template_list=request.template_list,
        )
        return reply(scores_from_outcomes(outcomes))

    except InvalidInputError as e:
        return error_reply(e.message)
    except Exception as e:
        logger.error("Unexpected error during batch comparison", error=str(e), exc_info=True)
        return error_reply(UNEXPECTED_ERROR, status_code=500)


@router.api_route(
    "/info",
    methods=["GET", "POST"],
    response_model=AlgorithmInfo,
    summary="Describe the comparison algorithm",
)
async def info() -> JSONResponse:
    """Return the static capability record."""
    return reply(get_algorithm_info().model_dump(by_alias=True))


@router.api_route(
    "/get_list",
    methods=["GET", "POST"],
    response_model=List[TemplateListEntry],
    summary="List stored templates",
    description="Lists every image in the template bucket with its encoded template.",
)
async def get_list(
    service: TemplateService = Depends(get_template_service)
) -> JSONResponse:
    """List stored templates by object key."""
    try:
        stored = await service.list_templates()
        entries = [TemplateListEntry.from_stored(item).model_dump(by_alias=True) for item in stored]
        return reply(entries)

    except StorageError as e:
        logger.error("Failed to list templates", error=str(e), details=e.details)
        return error_reply("Failed to list templates", status_code=502)
    except Exception as e:
        logger.error("Unexpected error listing templates", error=str(e), exc_info=True)
        return error_reply(UNEXPECTED_ERROR, status_code=500)
