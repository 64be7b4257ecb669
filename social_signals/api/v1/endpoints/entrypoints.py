"""
Entrypoint API Endpoints

List the priced entrypoints and invoke them by key.
"""

from typing import Any, Optional
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from social_signals.services.billing import PaymentsConfig
from social_signals.services.dispatch import Dispatcher, get_dispatcher
from social_signals.services.base import NotFoundError

router = APIRouter()

ERROR_STATUS = {
    "validation_error": 400,
    "not_found": 404,
    "upstream_error": 502,
    "internal_error": 500,
}


class InvokeRequest(BaseModel):
    """Invocation body. ``input`` may be omitted for entrypoints without fields."""

    input: Optional[Any] = None


@router.get("")
async def list_entrypoints(dispatcher: Dispatcher = Depends(get_dispatcher)):
    """
    List every entrypoint with its price and input schema.
    """
    return {
        "entrypoints": dispatcher.registry.describe(),
        "payments": PaymentsConfig.from_settings().to_dict(),
    }


@router.get("/{key}")
async def get_entrypoint(key: str, dispatcher: Dispatcher = Depends(get_dispatcher)):
    """
    Describe a single entrypoint.
    """
    try:
        return dispatcher.registry.get(key).describe()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("/{key}/invoke")
async def invoke_entrypoint(
    key: str,
    request: Optional[InvokeRequest] = None,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    """
    Invoke an entrypoint.

    Example: `POST /entrypoints/news/invoke` with `{"input": {"category": "science"}}`

    Returns `{"output": ...}` on success or `{"error": ...}` on failure.
    """
    raw_input = request.input if request is not None else None
    envelope = await dispatcher.dispatch(key, raw_input)

    if envelope.ok:
        return envelope.to_dict()

    return JSONResponse(
        status_code=ERROR_STATUS.get(envelope.error.code, 500),
        content=envelope.to_dict(),
    )
