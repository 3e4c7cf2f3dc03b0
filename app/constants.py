from datetime import date
from app.core.config import settings

# 开奖后刷新缓存的整点（24 小时制，马尼拉时间）
RESET_HOURS = [10, 14, 15, 17, 19, 20, 21]
DEFAULT_EXPIRE_MINUTE = 30

# 每个整点之后等上游刷新的分钟数：10 点场 10:30 开奖，21 点场电视直播延迟
CACHE_GATE_MINUTES = {10: 40, 21: 30}
DEFAULT_CACHE_GATE_MINUTE = 10

EARLIEST_DATE = date(2020, 8, 26)

MONTHS = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]

def k_results() -> str:
    return settings.RESULTS_CACHE_KEY
