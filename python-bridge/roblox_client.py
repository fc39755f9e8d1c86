"""
Roblox Font Search: HTTP client for the Roblox toolbox and thumbnail services.
Uses curl_cffi with browser impersonation so requests look like a Creator Store visit.
"""

import logging
from typing import Iterable
from urllib.parse import urlencode

from curl_cffi import CurlError, requests
from curl_cffi.requests import AsyncSession

from settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

# Keep UA version and Client Hints aligned with the impersonation target.
# Update these together when changing Settings.IMPERSONATE.
CHROME_VERSION = "136"
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    f"AppleWebKit/537.36 (KHTML, like Gecko) Chrome/{CHROME_VERSION}.0.0.0 Safari/537.36"
)
SEC_CH_UA = f'"Chromium";v="{CHROME_VERSION}", "Google Chrome";v="{CHROME_VERSION}", "Not.A/Brand";v="24"'

CREATE_ORIGIN = "https://create.roblox.com"


class RobloxError(Exception):
    """Structured upstream error: machine-readable code, message, optional HTTP status."""

    def __init__(self, code: str, message: str, status_code: int | None = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def open_session(cfg: Settings | None = None) -> AsyncSession:
    """New async session for one pipeline run. Use as `async with open_session() as s`."""
    cfg = cfg or default_settings
    return AsyncSession(impersonate=cfg.IMPERSONATE)


def _build_headers() -> dict:
    """Read-only JSON headers matching the impersonated Chrome build."""
    return {
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "en-US,en;q=0.9",
        "Origin": CREATE_ORIGIN,
        "Referer": f"{CREATE_ORIGIN}/store/fonts",
        "Sec-Ch-Ua": SEC_CH_UA,
        "Sec-Ch-Ua-Mobile": "?0",
        "Sec-Ch-Ua-Platform": '"macOS"',
        "Sec-Fetch-Dest": "empty",
        "Sec-Fetch-Mode": "cors",
        "Sec-Fetch-Site": "same-site",
        "User-Agent": USER_AGENT,
    }


def join_ids(asset_ids: Iterable[int]) -> str:
    return ",".join(str(asset_id) for asset_id in asset_ids)


def _build_url(base: str, path: str, params: dict) -> str:
    # Roblox expects raw commas in assetIds
    qs = urlencode(params, safe=",")
    return f"{base.rstrip('/')}{path}?{qs}"


def _handle_response(resp) -> list:
    """Common status handling. Returns the `data` list or raises RobloxError."""
    if resp.status_code == 429:
        raise RobloxError("RATE_LIMITED", "Too many requests", 429)
    if not 200 <= resp.status_code < 300:
        raise RobloxError(
            "HTTP_ERROR",
            f"HTTP {resp.status_code}: {resp.text[:200]}",
            resp.status_code,
        )
    try:
        body = resp.json()
    except Exception as e:
        raise RobloxError("PARSE_ERROR", f"Invalid JSON: {e}")

    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list):
        raise RobloxError("PARSE_ERROR", "Response has no 'data' list")
    return data


async def _get(session, url: str, cfg: Settings) -> list:
    logger.debug(f"GET {url}")
    try:
        resp = await session.get(url, headers=_build_headers(), timeout=cfg.REQUEST_TIMEOUT)
    except (requests.errors.RequestsError, CurlError) as e:
        raise RobloxError("REQUEST_FAILED", str(e))
    except Exception as e:
        raise RobloxError("UNKNOWN", str(e))
    return _handle_response(resp)


async def fetch_font_listing(session, cfg: Settings | None = None) -> list:
    """GET /marketplace/{category}: first page of the font category."""
    cfg = cfg or default_settings
    url = _build_url(
        cfg.TOOLBOX_API_URL,
        f"/marketplace/{cfg.FONT_CATEGORY_ID}",
        {"limit": cfg.FONT_LIST_LIMIT},
    )
    return await _get(session, url, cfg)


async def fetch_thumbnails(session, asset_ids: list[int], cfg: Settings | None = None) -> list:
    """GET /assets: preview images for one batch of asset ids."""
    cfg = cfg or default_settings
    url = _build_url(
        cfg.THUMBNAILS_API_URL,
        "/assets",
        {
            "assetIds": join_ids(asset_ids),
            "size": cfg.THUMBNAIL_SIZE,
            "format": cfg.THUMBNAIL_FORMAT,
        },
    )
    return await _get(session, url, cfg)


async def fetch_item_details(session, asset_ids: list[int], cfg: Settings | None = None) -> list:
    """GET /items/details: asset names for every id in a single call."""
    cfg = cfg or default_settings
    url = _build_url(
        cfg.TOOLBOX_API_URL,
        "/items/details",
        {"assetIds": join_ids(asset_ids)},
    )
    return await _get(session, url, cfg)
