"""ID verification endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from saidverify.api.schemas import VerifyRequest, VerifyResponse
from saidverify.core.exceptions import LogWriteError
from saidverify.verifier.orchestrator import verify_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["verify"])


@router.post("/verify", response_model=VerifyResponse)
def verify(body: VerifyRequest, request: Request) -> VerifyResponse:
    """Validate and decode one ID number; successful checks are logged."""
    state = request.app.state
    result = verify_id(body.id_number, leap_year_basis=state.settings.leap_year_basis)
    response = VerifyResponse(**result.model_dump())
    if not result.is_valid:
        return response

    try:
        state.result_log.append(result.id_number, state.preferences.result_format)
        response.log_written = True
    except LogWriteError as exc:
        logger.warning("%s", exc)
    return response
