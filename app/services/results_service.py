# app/services/results_service.py
import json
import logging
from datetime import date, datetime
from typing import Any, Dict, Optional

from app.constants import k_results
from app.core.errors import ExtractionError, NotFoundError
from app.core.timeutil import now_ph
from app.db.redis import r
from app.services.date_check import display_date
from app.services.expiry import Expiry, compute_expiry, should_cache
from app.services.fetcher import fetch_document
from app.services.grouping import group_results
from app.services.table_parser import extract_draws

logger = logging.getLogger(__name__)

SECONDS_IN_AN_HOUR = 3600


async def cache_results(data: Dict[str, Any], expiry: Expiry) -> None:
    ttl = max(1, round(expiry.seconds))
    await r.set(k_results(), json.dumps(data, ensure_ascii=False), ex=ttl)
    logger.info(
        "Results cached for %d hour(s), will expire on %s",
        round(expiry.seconds / SECONDS_IN_AN_HOUR),
        expiry.expires_at.strftime("%m/%d/%Y, %H:%M:%S"),
    )


async def parse_results(url: str, filter_date: Optional[date] = None) -> Dict[str, Any]:
    """
    拉取结果页 → 解析所有表格 → 按 game_id 分组。
    只有当天（不带 filter_date）的结果会读写 Redis 缓存。
    """
    now: datetime = now_ph()

    if filter_date is None:
        cached = await r.get(k_results())
        if cached is not None:
            logger.info("Cache hit: %s", now.strftime("%m/%d/%Y, %H:%M:%S"))
            return json.loads(cached)

    try:
        soup = await fetch_document(url)
        draws = extract_draws(soup)

        grouped = group_results(
            draws,
            display_date(filter_date or now.date()),
            keep_all=filter_date is not None,
        )
        if filter_date is not None:
            return grouped

        if should_cache(now):
            await cache_results(grouped, compute_expiry(now))
        else:
            logger.info("Full fetch, minutes now: %d", now.minute)

        return grouped
    except Exception as e:
        logger.exception("[parse_results] %s: %s", url, e)
        raise ExtractionError() from e


def get_game(collection: Dict[str, Any], game_id: str) -> Any:
    game = collection.get(game_id) if game_id != "date" else None
    if not game:
        logger.error("Invalid game ID: %s", game_id)
        raise NotFoundError(game_id)
    return game
