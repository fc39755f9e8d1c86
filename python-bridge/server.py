#!/usr/bin/env python3
"""
Roblox Font Search: Python Bridge
Local HTTP server for the font search frontend. Uses curl_cffi for upstream requests.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from font_search import FontSearchError, search_fonts
from settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Roblox Font Search Bridge",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

FETCH_FAILED_MESSAGE = "Failed to fetch fonts"


def _error_response(code: str, message: str, status_code: int = 500) -> JSONResponse:
    """Structured error for the frontend: { ok: false, code, message }"""
    return JSONResponse(
        status_code=status_code,
        content={"ok": False, "code": code, "message": message},
    )


@app.get("/health")
def health():
    """Health check for the frontend to verify the bridge is running."""
    return {"ok": True, "service": "roblox-font-search-bridge"}


@app.get("/api/fonts")
async def list_fonts():
    """
    Searchable fonts from the Roblox Creator Store with preview and style category.
    Any upstream failure that loses the whole list is reported as a plain 500.
    """
    try:
        fonts = await search_fonts()
    except FontSearchError as e:
        logger.error(f"Error fetching fonts: {e}")
        return _error_response("FONT_FETCH_FAILED", FETCH_FAILED_MESSAGE)
    except Exception:
        logger.exception("Unexpected error fetching fonts")
        return _error_response("FONT_FETCH_FAILED", FETCH_FAILED_MESSAGE)
    return {"data": [font.model_dump() for font in fonts]}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT, log_level=settings.LOG_LEVEL.lower())
