"""Receipt Points server.

FastMCP server exposing the receipt operations as MCP tools and as plain
REST routes, served over HTTP with a CORS policy.
Run: receipt-points
"""

from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from . import __version__
from .config import Settings
from .core.errors import NotFoundError, ValidationError
from .core.models import Receipt, ScoreRecord
from .service import ReceiptService
from .store import ReceiptStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)
WRITES_STORE = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=True, openWorldHint=False)


def _error(status_code: int, message: str, detail: Optional[str] = None) -> JSONResponse:
    body = {"error": message}
    if detail:
        body["detail"] = detail
    return JSONResponse(body, status_code=status_code)


def create_server(store: Optional[ReceiptStore] = None, settings: Optional[Settings] = None) -> FastMCP:
    """Build a FastMCP server bound to its own (or the given) receipt store."""
    settings = settings or Settings.from_env()
    service = ReceiptService(
        store if store is not None else ReceiptStore(),
        afternoon_end_inclusive=settings.afternoon_end_inclusive,
    )

    mcp = FastMCP(
        "Receipt Points",
        instructions="Submit purchase receipts to earn loyalty points, then look up the points by receipt ID.",
    )

    # ─── MCP Tools ───────────────────────────────────────────────────────

    @mcp.tool(annotations=WRITES_STORE)
    def process_receipt(receipt: Receipt) -> dict:
        """Score a purchase receipt and store the points.

        Returns the receipt ID to use with get_receipt_points.
        """
        return {"id": service.process_receipt(receipt)}

    @mcp.tool(annotations=READ_ONLY)
    def get_receipt_points(receipt_id: str) -> dict:
        """Points awarded to a previously processed receipt.

        Args:
            receipt_id: ID returned by process_receipt.
        """
        return ScoreRecord(id=receipt_id, points=service.get_points(receipt_id)).model_dump()

    @mcp.tool(annotations=READ_ONLY)
    def explain_receipt_points(receipt: Receipt) -> dict:
        """Show how many points each rule awards a receipt, without storing it."""
        breakdown = service.explain(receipt)
        return {"rules": breakdown.model_dump(), "points": breakdown.total}

    # ─── REST Routes ─────────────────────────────────────────────────────

    @mcp.custom_route("/receipts/process", methods=["POST"])
    async def process_receipt_route(request: Request) -> JSONResponse:
        try:
            receipt = Receipt.model_validate(await request.json())
        except ValueError as exc:
            # Malformed JSON and schema mismatches are both ValueErrors.
            logger.warning("Rejected receipt body: %s", exc)
            return _error(400, "Invalid receipt JSON", str(exc))

        try:
            receipt_id = service.process_receipt(receipt)
        except ValidationError as exc:
            return _error(400, "The receipt is invalid.", str(exc))
        return JSONResponse({"id": receipt_id})

    @mcp.custom_route("/receipts/{id}/points", methods=["GET"])
    async def get_points_route(request: Request) -> JSONResponse:
        try:
            points = service.get_points(request.path_params["id"])
        except NotFoundError:
            return _error(404, "No receipt found for that ID.")
        return JSONResponse({"points": points})

    @mcp.custom_route("/health", methods=["GET"])
    async def health_route(request: Request) -> JSONResponse:
        return JSONResponse({
            "ok": True,
            "service": "receipt-points",
            "version": __version__,
            "receipts": len(service.store),
        })

    return mcp


def create_app(store: Optional[ReceiptStore] = None, settings: Optional[Settings] = None) -> Starlette:
    """HTTP application: REST routes, MCP streamable-HTTP endpoint, and CORS."""
    settings = settings or Settings.from_env()
    app = create_server(store=store, settings=settings).streamable_http_app()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=CORS_METHODS,
        allow_headers=["*"],
        allow_credentials=True,
    )
    return app


def main():
    """Entry point for the CLI command."""
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    if settings.transport == "stdio":
        logger.info("Serving MCP over stdio")
        create_server(settings=settings).run()
        return

    logger.info("Listening on %s:%d (allowed origins: %s)", settings.host, settings.port, ", ".join(settings.allowed_origins))
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
