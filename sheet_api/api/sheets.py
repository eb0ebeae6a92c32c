# sheet_api/api/sheets.py

import json
import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool

from sheet_api.deps import get_store
from sheet_api.models.sheets import (
    ErrorResponse,
    MessageResponse,
    ReadResponse,
    WriteRequest,
)
from sheet_api.services.tables import (
    append_record,
    delete_record,
    list_records,
    update_record,
)
from sheet_api.store.base import TableStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exec", tags=["sheets"])

INVALID_ACTION = "Invalid action"
SAVED_MESSAGE = "Data saved successfully"


@router.get("", response_model=Union[ReadResponse, ErrorResponse])
def handle_read(
    action: Optional[str] = Query(default=None, description="Only 'read' is supported"),
    sheet: Optional[str] = Query(default=None, description="Sheet (table) name"),
    store: TableStore = Depends(get_store),
) -> Union[ReadResponse, ErrorResponse]:
    """
    Return every row of a sheet. A sheet that does not exist yet is created
    and reads as empty.
    """
    if action != "read":
        return ErrorResponse(error=INVALID_ACTION)

    try:
        records = list_records(store, sheet)
    except Exception as e:
        logger.exception("Read of sheet %r failed", sheet)
        return ErrorResponse(error=str(e))

    return ReadResponse(success=True, data=records)


@router.post("", response_model=Union[MessageResponse, ErrorResponse])
async def handle_write(
    request: Request,
    store: TableStore = Depends(get_store),
) -> Union[MessageResponse, ErrorResponse]:
    """
    Dispatch a JSON body ``{action, sheet, data}`` to create / update / delete.

    The body is read raw so clients posting ``text/plain`` are accepted, and a
    body that does not parse comes back as ``{"error": ...}`` instead of a 422.
    Store calls run in the threadpool, same as the plain ``def`` routes.
    """
    try:
        payload = json.loads(await request.body(), parse_constant=_reject_constant)
        if not isinstance(payload, dict):
            return ErrorResponse(error=INVALID_ACTION)

        body = WriteRequest.model_validate(payload)
        return await run_in_threadpool(_dispatch_write, store, body)

    except Exception as e:
        logger.exception("Write request failed")
        return ErrorResponse(error=str(e))


def _reject_constant(name: str):
    # NaN / Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _dispatch_write(store: TableStore, body: WriteRequest) -> Union[MessageResponse, ErrorResponse]:
    if body.action == "create":
        return _handle_create(store, body)
    elif body.action == "update":
        return update_record(store, body.sheet, body.data)
    elif body.action == "delete":
        return delete_record(store, body.sheet, body.data)

    return ErrorResponse(error=INVALID_ACTION)


def _handle_create(store: TableStore, body: WriteRequest) -> Union[MessageResponse, ErrorResponse]:
    try:
        append_record(store, body.sheet, body.data)
    except Exception as e:
        logger.exception("Append to sheet %r failed", body.sheet)
        return ErrorResponse(error=str(e))

    return MessageResponse(success=True, message=SAVED_MESSAGE)
