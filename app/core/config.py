import os
from dotenv import load_dotenv
load_dotenv()

class Settings:
    APP_NAME = os.getenv("APP_NAME", "pcso-results-api")
    APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
    APP_ENV = os.getenv("APP_ENV", "dev")
    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8000"))
    TZ = os.getenv("TZ", "Asia/Manila")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    REDIS_URL = f"redis://{os.getenv('REDIS_HOST','127.0.0.1')}:{os.getenv('REDIS_PORT','6379')}/{os.getenv('REDIS_DB','0')}"
    RESULTS_CACHE_KEY = os.getenv("RESULTS_CACHE_KEY", "resultsCache")

    # 当天结果页 / 按日期结果页（日期格式 month-day-year 直接拼在后面）
    RESULTS_TODAY_URL = os.getenv("RESULTS_TODAY_URL", "https://www.lottopcso.com/")
    RESULTS_BY_DATE_URL = os.getenv("RESULTS_BY_DATE_URL", "https://www.lottopcso.com/pcso-lotto-results-")
    FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", "10"))
    FETCH_USER_AGENT = os.getenv(
        "FETCH_USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
    )

settings = Settings()
