"""FastAPI dependencies for request processing."""

from typing import Annotated

from fastapi import Depends

from realiser_core.contracts import RequestProcessor
from realiser_service.settings import get_service_settings

_processor: RequestProcessor | None = None


def get_processor() -> RequestProcessor:
    """Return the process-wide request processor, creating it on first use."""
    global _processor
    if _processor is None:
        _processor = RequestProcessor(recording_dir=get_service_settings().recording_dir)
    return _processor


Processor = Annotated[RequestProcessor, Depends(get_processor)]
