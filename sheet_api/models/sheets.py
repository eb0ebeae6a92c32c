# sheet_api/models/sheets.py

from typing import Any, Dict, List

from pydantic import BaseModel


class ReadResponse(BaseModel):
    success: bool = True
    data: List[Dict[str, Any]]


class MessageResponse(BaseModel):
    success: bool
    message: str


class ErrorResponse(BaseModel):
    error: str


class WriteRequest(BaseModel):
    """
    Body of a POST. Unknown keys are ignored; ``data`` is left untyped so the
    create path can report a non-object payload as an operation error.
    """

    action: Any = None
    sheet: Any = None
    data: Any = None
