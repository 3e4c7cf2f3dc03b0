import re
from enum import Enum
from typing import Iterable, List, Optional


class GameID(str, Enum):
    ULTRA_LOTTO_6_58 = "Ultra Lotto 6/58"
    GRAND_LOTTO_6_55 = "Grand Lotto 6/55"
    SUPERLOTTO_6_49 = "Superlotto 6/49"
    MEGALOTTO_6_45 = "Megalotto 6/45"
    LOTTO_6_42 = "Lotto 6/42"
    LOTTO_6D = "6D Lotto"
    LOTTO_4D = "4D Lotto"
    LOTTO_3D = "3D Lotto"
    LOTTO_2D = "2D Lotto"
    STL_SWER2 = "STL Swer2"
    STL_SWER3 = "STL Swer3"
    STL_SWER4 = "STL Swer4"
    STL_PARES = "STL Pares"


class Corporation(str, Enum):
    PCSO = "PCSO"
    STL_LUZON = "STL Luzon"
    STL_VISAYAS = "STL Visayas"
    STL_MINDANAO = "STL Mindanao"


class DescriptionKey(str, Enum):
    LOTTO_GAMES = "Lotto Games"
    DIGIT_GAMES = "Digit Games"
    SMALL_TOWN_LOTTERY = "Small Town Lottery"


# 顺序即开奖顺序，最后一项是默认时间
class ResultTime(str, Enum):
    T_10_30_AM = "10:30 AM"
    T_2_PM = "2:00 PM"
    T_3_PM = "3:00 PM"
    T_5_PM = "5:00 PM"
    T_7_PM = "7:00 PM"
    T_8_PM = "8:00 PM"
    T_9_PM = "9:00 PM"


STAND_BY = "Stand by…"
UPDATING = "Updating…"
PLACEHOLDERS = (STAND_BY, UPDATING)

GAME_IDS = frozenset(g.value for g in GameID)
CORPORATIONS = frozenset(c.value for c in Corporation)
DESCRIPTION_KEYS = frozenset(d.value for d in DescriptionKey)
RESULT_TIMES = [t.value for t in ResultTime]
DEFAULT_TIME = RESULT_TIMES[-1]

_ID_SEPARATORS = re.compile(r"[\s/]+")


def format_game_id(label: str) -> str:
    """'Ultra Lotto 6/58' -> 'ULTRA-LOTTO-6-58'"""
    return _ID_SEPARATORS.sub("-", label.strip()).upper()


def validate_vocabularies(vocabularies: Optional[Iterable[Iterable[str]]] = None) -> None:
    """
    词表两两不能有相同标签，标签里也不能带 '-'（会被当成号码），否则抛 RuntimeError
    """
    if vocabularies is None:
        vocabularies = (GAME_IDS, CORPORATIONS, DESCRIPTION_KEYS, RESULT_TIMES, PLACEHOLDERS)
    groups: List[frozenset] = [frozenset(v) for v in vocabularies]

    for i, left in enumerate(groups):
        for right in groups[i + 1:]:
            overlap = left & right
            if overlap:
                raise RuntimeError(f"Vocabulary labels overlap: {sorted(overlap)}")

    for group in groups:
        for label in group:
            if "-" in label:
                raise RuntimeError(f"Vocabulary label looks like a result: {label!r}")
