import redis.asyncio as redis
from app.core.config import settings

# 连接在第一次命令时才建立
r = redis.from_url(settings.REDIS_URL, decode_responses=True)
