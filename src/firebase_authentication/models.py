"""Pydantic models for verification results."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class DecodedToken(BaseModel):
    """Header and payload of a verified ID token."""
    model_config = ConfigDict(frozen=True)

    header: Dict[str, Any]
    payload: Dict[str, Any]


class VerificationResult(BaseModel):
    """Outcome of a successful ID token verification."""
    model_config = ConfigDict(frozen=True)

    uid: str
    decoded_token: DecodedToken
