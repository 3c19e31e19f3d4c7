from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from npm_connector import connector

app = FastAPI(title="npm Downloads Connector API", version="0.1.0")
logger = logging.getLogger("npm_connector.api")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_request_start(request, call_next):
    logger.info(
        "request sent method=%s path=%s query=%s",
        request.method,
        request.url.path,
        request.url.query,
    )
    return await call_next(request)


@app.exception_handler(connector.ConnectorUserError)
async def connector_user_error(
    request: Request, exc: connector.ConnectorUserError
) -> JSONResponse:
    error: dict[str, Any] = {"text": exc.text}
    if connector.is_admin_user() and exc.debug_text:
        error["debugText"] = exc.debug_text
    return JSONResponse(status_code=502, content={"error": error})


@app.get("/api/v1/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/v1/config")
def config() -> dict[str, Any]:
    return connector.get_config()


@app.get("/api/v1/auth-type")
def auth_type() -> dict[str, str]:
    return connector.get_auth_type()


@app.get("/api/v1/admin")
def admin() -> dict[str, bool]:
    return {"isAdminUser": connector.is_admin_user()}


@app.post("/api/v1/schema")
def schema(payload: dict[str, Any] | None = Body(default=None)) -> dict[str, Any]:
    return connector.get_schema(payload or {})


@app.post("/api/v1/data")
def data(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    result = connector.get_data(payload)
    return {
        "schema": result["schema"],
        "rows": [{"values": row} for row in result["rows"]],
    }
