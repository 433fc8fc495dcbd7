"""
Domain errors and the FastAPI handlers that render them.

Every error body has the shape ``{"message": str, "errors": [...]}`` where
``errors`` is only present for validation failures.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class SupplyChainError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(SupplyChainError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")


class InvalidIdentifierError(SupplyChainError):
    """Path id that is not an integer."""

    def __init__(self, entity: str):
        super().__init__(f"Invalid {entity} ID")


class ConflictError(SupplyChainError):
    """A unique key (sku, orderId, nodeId, edgeId, username) is already taken."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, entity: str, field: str, value: Any):
        super().__init__(f"{entity} with {field} '{value}' already exists")
        self.field = field
        self.value = value


class GraphReferenceError(SupplyChainError):
    """Edge endpoint that does not match any workflow node key."""

    def __init__(self, field: str, node_key: str):
        super().__init__(f"Edge {field} '{node_key}' does not match any workflow node")
        self.field = field


def error_body(message: str, errors: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message}
    if errors is not None:
        body["errors"] = errors
    return body


def _validation_details(exc: RequestValidationError) -> List[Dict[str, Any]]:
    details = []
    for err in exc.errors():
        # drop the leading "body"/"path"/"query" marker so path names the field
        loc = list(err.get("loc", ()))
        if loc and loc[0] in ("body", "path", "query"):
            loc = loc[1:]
        details.append({"path": loc, "message": err.get("msg", ""), "code": err.get("type", "")})
    return details


async def supply_chain_error_handler(request: Request, exc: SupplyChainError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = _validation_details(exc)
    logger.warning("%s %s -> 400: %d validation error(s)", request.method, request.url.path, len(details))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(error_body("Validation error", details)),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def default_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SupplyChainError, supply_chain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, default_exception_handler)
