"""
Media Proxy API Routes

Client-facing endpoints that forward to the vendor media API:
- Federated session token
- Media URIs for a camera

The vendor API key is attached server side and never leaves the proxy.
"""

from fastapi import APIRouter, HTTPException, Depends, status
from typing import Dict, Any
from pydantic import BaseModel, Field
import logging

from ...core.exceptions import (
    StreamSetupError,
    TransportError,
    UpstreamStatusError,
    MalformedResponseError,
)
from ...infrastructure.media_api import MediaApiClient, get_media_api_client

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["media-proxy"])


# Request models (field names follow the vendor API)
class FederatedTokenRequest(BaseModel):
    durationSec: int = Field(..., gt=0, description="Token validity in seconds")


class MediaUrisRequest(BaseModel):
    cameraUuid: str = Field(..., min_length=1)


def to_http_exception(error: StreamSetupError) -> HTTPException:
    """Map a vendor call failure onto a gateway error."""
    if isinstance(error, TransportError) and error.timed_out:
        return HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail="Media API timed out")
    if isinstance(error, UpstreamStatusError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Media API returned HTTP {error.status_code}",
        )
    if isinstance(error, MalformedResponseError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Media API returned a malformed body")
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Media API unreachable")


# ==================== ENDPOINTS ====================

@router.post("/federated-token")
async def create_federated_token(
    request: FederatedTokenRequest,
    client: MediaApiClient = Depends(get_media_api_client),
) -> Dict[str, Any]:
    """
    Issue a federated session token.

    Returns the vendor body unchanged; the browser reads
    federatedSessionToken from it.
    """
    try:
        return await client.generate_federated_token(request.durationSec)
    except StreamSetupError as e:
        logger.error(f"Federated token request failed: {e}")
        raise to_http_exception(e)


@router.post("/media-uris")
async def get_media_uris(
    request: MediaUrisRequest,
    client: MediaApiClient = Depends(get_media_api_client),
) -> Dict[str, Any]:
    """Return every stream URI the vendor has for the camera."""
    try:
        return await client.get_media_uris(request.cameraUuid)
    except StreamSetupError as e:
        logger.error(f"Media URI request for {request.cameraUuid} failed: {e}")
        raise to_http_exception(e)
