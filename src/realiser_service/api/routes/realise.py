"""Realization endpoint."""

from fastapi import APIRouter, HTTPException

from realiser_core.contracts import RealisationRequest, RealisationResponse
from realiser_core.errors import RealisationError
from realiser_service.api.deps import Processor

router = APIRouter()


@router.post("/realise", response_model=RealisationResponse)
def realise(request: RealisationRequest, processor: Processor) -> RealisationResponse:
    """Realize a document tree, or run a recording/no-op operation."""
    try:
        text = processor.process(request)
    except RealisationError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "error_type": e.error_type.value,
                "message": e.message,
                "kind": e.details.get("kind"),
                "category": e.details.get("category"),
            },
        ) from e
    return RealisationResponse(realisation=text)
