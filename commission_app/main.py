# commission_app/main.py
import logging
import os

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config.config_manager import get_config_manager
from .routers.payout import router as payout_router
from .utils.logging_utils import setup_logging


def _configure_logging() -> None:
    manager = get_config_manager()
    log_cfg = manager.get_section("logging")
    setup_logging(
        os.getenv("LOG_LEVEL") or log_cfg.get("level", "INFO"),
        log_cfg.get("file"),
        bool(log_cfg.get("json", False)),
    )


_configure_logging()
log = logging.getLogger("commission_app")

# ---------- App ----------
app = FastAPI(
    title="AE Commission Calculator",
    version="1.0.0",
    description="Pro-rated base, bundling bonus tiers and over-quota accelerator for AE payouts.",
)

app.include_router(payout_router)


# ---------- Exception Handlers ----------
@app.exception_handler(RequestValidationError)
async def _validation(request: Request, exc: RequestValidationError):
    return JSONResponse({"error": "Invalid request body", "details": jsonable_encoder(exc.errors())}, status_code=422)


@app.exception_handler(Exception)
async def _unhandled(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": f"Server error: {type(exc).__name__}: {exc}"}, status_code=500)


@app.get("/health")
def health():
    return {"ok": True}
