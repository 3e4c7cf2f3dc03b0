from dataclasses import dataclass
from datetime import datetime, timedelta

from app.constants import (
    CACHE_GATE_MINUTES,
    DEFAULT_CACHE_GATE_MINUTE,
    DEFAULT_EXPIRE_MINUTE,
    RESET_HOURS,
)
from app.core.timeutil import localize, to_naive


@dataclass(frozen=True)
class Expiry:
    seconds: float
    expires_at: datetime  # 马尼拉时间，带时区


def compute_expiry(now: datetime) -> Expiry:
    """
    当天快照缓存到下一个开奖整点：
      - 21 点以后 -> 次日 10:30
      - 10 点以后 -> 下一个整点的 :00
      - 否则      -> 下一个整点的 :30
    """
    local_now = to_naive(now).replace(microsecond=0)
    hour = local_now.hour

    if 21 <= hour <= 23:
        expire_hour = RESET_HOURS[0]
        expire_day = local_now.date() + timedelta(days=1)
        expire_minute = DEFAULT_EXPIRE_MINUTE
    else:
        expire_hour = next(h for h in RESET_HOURS if hour < h)
        expire_day = local_now.date()
        expire_minute = 0 if hour > 10 else DEFAULT_EXPIRE_MINUTE

    expires_at = datetime(expire_day.year, expire_day.month, expire_day.day, expire_hour, expire_minute)
    seconds = abs((local_now - expires_at).total_seconds())
    return Expiry(seconds=seconds, expires_at=localize(expires_at))


def should_cache(now: datetime) -> bool:
    # 上游开奖后几分钟才会更新页面，太早缓存会把旧结果锁住
    local_now = to_naive(now)
    gate = CACHE_GATE_MINUTES.get(local_now.hour, DEFAULT_CACHE_GATE_MINUTE)
    return local_now.minute >= gate
