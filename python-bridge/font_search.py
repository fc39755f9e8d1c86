"""
Roblox Font Search: font list pipeline.

  1. Font ids from the marketplace listing (fatal on failure)
  2. Preview URLs from the thumbnail service, in batches (a failed batch is skipped)
  3. Display names from the item details service, one call (fatal on failure)
  4. Join by id in listing order, classify by name, drop fonts without a preview
"""

import asyncio
import logging
from typing import Iterator

from pydantic import BaseModel

import roblox_client
from font_categories import FontCategory, classify
from roblox_client import RobloxError
from settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class FontRecord(BaseModel):
    id: int
    name: str
    preview: str
    category: FontCategory


class FontSearchError(Exception):
    """A required upstream call (listing or details) failed; the whole search is lost."""

    def __init__(self, stage: str, error: RobloxError):
        self.stage = stage
        self.error = error
        super().__init__(f"{stage} failed: [{error.code}] {error.message}")


def _as_id(value) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def chunk_ids(asset_ids: list[int], size: int) -> Iterator[list[int]]:
    """Consecutive slices of at most `size` ids; the last one may be shorter."""
    for start in range(0, len(asset_ids), size):
        yield asset_ids[start:start + size]


async def resolve_font_ids(session, cfg: Settings) -> list[int]:
    try:
        items = await roblox_client.fetch_font_listing(session, cfg)
    except RobloxError as e:
        raise FontSearchError("listing", e) from e

    font_ids = []
    for item in items:
        asset_id = _as_id(item.get("id")) if isinstance(item, dict) else None
        if asset_id is not None:
            font_ids.append(asset_id)
    if len(font_ids) != len(items):
        logger.debug(f"Skipped {len(items) - len(font_ids)} listing entries without an id")
    return font_ids


async def resolve_previews(session, font_ids: list[int], cfg: Settings) -> dict[int, str]:
    """
    Map asset id -> preview image URL.

    Batches run concurrently (bounded by PREVIEW_CONCURRENCY). A batch that
    fails is logged and skipped; its ids simply stay out of the mapping.
    """
    previews: dict[int, str] = {}
    semaphore = asyncio.Semaphore(cfg.PREVIEW_CONCURRENCY)

    async def fetch_batch(number: int, batch: list[int]) -> None:
        async with semaphore:
            try:
                entries = await roblox_client.fetch_thumbnails(session, batch, cfg)
            except RobloxError as e:
                logger.warning(f"Failed to fetch thumbnails for batch {number}: [{e.code}] {e.message}")
                return
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            target_id = _as_id(entry.get("targetId"))
            image_url = entry.get("imageUrl")
            if target_id is not None and isinstance(image_url, str) and image_url:
                previews[target_id] = image_url

    batches = list(chunk_ids(font_ids, cfg.THUMBNAIL_BATCH_SIZE))
    await asyncio.gather(*(fetch_batch(n, batch) for n, batch in enumerate(batches, start=1)))
    return previews


async def resolve_names(session, font_ids: list[int], cfg: Settings) -> dict[int, str]:
    """Map asset id -> display name. Entries without an asset id/name pair are ignored."""
    try:
        items = await roblox_client.fetch_item_details(session, font_ids, cfg)
    except RobloxError as e:
        raise FontSearchError("details", e) from e

    names: dict[int, str] = {}
    for item in items:
        asset = item.get("asset") if isinstance(item, dict) else None
        if not isinstance(asset, dict):
            continue
        asset_id = _as_id(asset.get("id"))
        name = asset.get("name")
        if asset_id is not None and isinstance(name, str) and name:
            names[asset_id] = name
    return names


def reconcile(font_ids: list[int], previews: dict[int, str], names: dict[int, str]) -> list[FontRecord]:
    """Join the three sources in listing order, keeping fonts that have a name and a preview."""
    fonts = []
    for font_id in font_ids:
        name = names.get(font_id) or f"Font {font_id}"
        preview = previews.get(font_id) or ""
        if not (name and preview):
            continue
        fonts.append(FontRecord(id=font_id, name=name, preview=preview, category=classify(name)))
    return fonts


async def _run(session, cfg: Settings) -> list[FontRecord]:
    logger.info("Step 1: Fetching font ids...")
    font_ids = await resolve_font_ids(session, cfg)
    if not font_ids:
        logger.info("No font ids returned")
        return []
    logger.info(f"Found {len(font_ids)} font ids")

    logger.info("Step 2: Fetching previews...")
    previews = await resolve_previews(session, font_ids, cfg)

    logger.info("Step 3: Fetching font names...")
    names = await resolve_names(session, font_ids, cfg)

    logger.info("Step 4: Combining data and determining categories...")
    fonts = reconcile(font_ids, previews, names)
    logger.info(f"Successfully processed {len(fonts)} fonts")
    return fonts


async def search_fonts(session=None, cfg: Settings | None = None) -> list[FontRecord]:
    """
    Run the full pipeline once.

    Args:
        session: Async HTTP session with a curl_cffi-compatible `get`. When
            omitted, a fresh impersonating session is opened and closed here.
        cfg: Settings override (defaults to the process settings).

    Raises:
        FontSearchError: the listing or details call failed.
    """
    cfg = cfg or default_settings
    if session is not None:
        return await _run(session, cfg)
    async with roblox_client.open_session(cfg) as own_session:
        return await _run(own_session, cfg)
