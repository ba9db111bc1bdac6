"""Request/response bodies for the verification API."""

from __future__ import annotations

from pydantic import BaseModel

from saidverify.models.verification import VerificationResult


class VerifyRequest(BaseModel):
    id_number: str


class VerifyResponse(VerificationResult):
    """Verification result plus whether the result log was written."""

    log_written: bool = False
