from enum import Enum
from typing import Optional

from app.models.vocabulary import (
    CORPORATIONS,
    DESCRIPTION_KEYS,
    GAME_IDS,
    PLACEHOLDERS,
    RESULT_TIMES,
    validate_vocabularies,
)


class Category(str, Enum):
    GAME_ID = "game_id"
    CORPORATION = "corporation"
    DESCRIPTION = "description"
    TIME = "time"
    RESULT = "result"


validate_vocabularies()

_TIMES = frozenset(RESULT_TIMES)


def is_result(text: str) -> bool:
    # "D-D-D" 形式的号码，或者还没开奖时的占位文字
    return "-" in text or text in PLACEHOLDERS


def classify(text: str) -> Optional[Category]:
    if text in GAME_IDS:
        return Category.GAME_ID
    if text in CORPORATIONS:
        return Category.CORPORATION
    if text in DESCRIPTION_KEYS:
        return Category.DESCRIPTION
    if text in _TIMES:
        return Category.TIME
    if is_result(text):
        return Category.RESULT
    return None
