"""
Response bodies shared by several routers.
"""
from pydantic import BaseModel


class Message(BaseModel):
    message: str


class ErrorDetail(BaseModel):
    """Body of every error raised as a CertPrepError."""

    detail: str


def error_responses(*status_codes: int) -> dict:
    """OpenAPI ``responses`` entries documenting ``ErrorDetail`` for the given codes."""
    return {code: {"model": ErrorDetail} for code in status_codes}
