"""
Exception handlers for the receipts API.
Malformed receipts are a client error (400), whether FastAPI rejects the body or the rules engine does.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from common.rules_engine import InvalidReceiptError

logger = logging.getLogger(__name__)

INVALID_RECEIPT_MESSAGE = "The receipt is invalid."


def invalid_receipt_handler(request: Request, exc: InvalidReceiptError):
    logger.warning("Rejected receipt on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "message": INVALID_RECEIPT_MESSAGE,
            "details": [{"field": exc.field, "reason": exc.reason}],
        },
    )


def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "reason": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    logger.warning("Rejected request body on %s: %s", request.url.path, details)
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"message": INVALID_RECEIPT_MESSAGE, "details": details},
    )
