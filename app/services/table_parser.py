# app/services/table_parser.py
"""
PCSO 结果页解析。

页面里每个 `.post_content figure` 是一张表：
  - 表头行给出本表的游戏（最多 3 个同场开奖）、运营方、分类说明
  - 表体每行只有位置信息，没有标签，需要按单元格内容归类后逐行拼装
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from bs4 import BeautifulSoup, Tag

from app.models.vocabulary import DEFAULT_TIME, format_game_id
from app.schemas.results import DrawRecord
from app.services.classifier import Category, classify

logger = logging.getLogger(__name__)

MAX_GAMES_PER_TABLE = 3


@dataclass(frozen=True)
class HeaderScan:
    game_id: str = ""
    game_id2: str = ""
    game_id3: str = ""
    corporation: str = ""
    description: str = ""


@dataclass
class ParseSession:
    """扫描一张表的表体时暂存的值"""

    game_id: str = ""
    game_id2: str = ""
    game_id3: str = ""
    description: str = ""
    corporation: str = ""
    time: str = ""
    result: str = ""
    result2: str = ""
    result3: str = ""

    @classmethod
    def from_header(cls, header: HeaderScan) -> "ParseSession":
        return cls(
            game_id=header.game_id,
            game_id2=header.game_id2,
            game_id3=header.game_id3,
            corporation=header.corporation,
            description=header.description,
        )

    def clear_games(self) -> None:
        self.game_id = self.game_id2 = self.game_id3 = ""
        self.clear_results()

    def clear_results(self) -> None:
        self.result = self.result2 = self.result3 = ""

    def add_result(self, text: str) -> None:
        if not self.result:
            self.result = text
        elif not self.result2:
            self.result2 = text
        elif not self.result3:
            self.result3 = text
        else:
            logger.debug("Extra result cell ignored: %s", text)

    def record(self, game_id: str, result: str, time: str) -> DrawRecord:
        return DrawRecord(
            game_id=format_game_id(game_id),
            description=self.description,
            time=time,
            corporation=self.corporation,
            result=result,
        )


def scan_header(cells: Iterable[str]) -> HeaderScan:
    game_ids: List[str] = []
    corporation = ""
    description = ""

    for text in cells:
        category = classify(text)
        if category is Category.GAME_ID:
            if len(game_ids) < MAX_GAMES_PER_TABLE:
                game_ids.append(text)
        elif category is Category.CORPORATION:
            corporation = text
        elif category is Category.DESCRIPTION:
            description = text

    game_ids += [""] * (MAX_GAMES_PER_TABLE - len(game_ids))
    return HeaderScan(
        game_id=game_ids[0],
        game_id2=game_ids[1],
        game_id3=game_ids[2],
        corporation=corporation,
        description=description,
    )


def process_row(session: ParseSession, cells: Iterable[str]) -> List[DrawRecord]:
    """
    读入一行单元格并更新 session，然后按固定顺序判断能否产出记录：
      1) 单游戏表（只有 slot1）：有说明 + 号码即可产出，时间缺省为最后一场
      2) slot1 同场多游戏：需要时间 + 号码
      3) slot2：需要时间 + result2
      4) slot3：需要时间 + result3，之后清空全部号码
    单元格必须严格从左到右处理，清空条件依赖当时已填充的 slot。
    """
    for text in cells:
        category = classify(text)
        if category is Category.DESCRIPTION:
            session.description = text
            # 同一张表里开始了新的一组游戏
            if session.game_id and session.game_id2:
                session.clear_games()
        elif category is Category.TIME:
            session.time = text
        elif category is Category.RESULT:
            session.add_result(text)

    records: List[DrawRecord] = []

    if session.game_id and session.description and session.result and not session.game_id2:
        records.append(session.record(session.game_id, session.result, session.time or DEFAULT_TIME))
        session.game_id = ""
        session.description = ""
        session.result = ""

    if session.game_id and session.time and session.result:
        records.append(session.record(session.game_id, session.result, session.time))
        if not session.game_id2:
            session.result = ""

    if session.game_id2 and session.time and session.result2:
        records.append(session.record(session.game_id2, session.result2, session.time))
        if not session.game_id3:
            session.result = ""
            session.result2 = ""

    if session.game_id3 and session.time and session.result3:
        records.append(session.record(session.game_id3, session.result3, session.time))
        session.clear_results()

    return records


def assemble_body(session: ParseSession, rows: Iterable[Sequence[str]]) -> List[DrawRecord]:
    records: List[DrawRecord] = []
    for cells in rows:
        records.extend(process_row(session, cells))
    return records


def parse_table(header_cells: Iterable[str], body_rows: Iterable[Sequence[str]]) -> List[DrawRecord]:
    session = ParseSession.from_header(scan_header(header_cells))
    return assemble_body(session, body_rows)


def _cell_texts(row: Tag) -> List[str]:
    return [cell.get_text().strip() for cell in row.find_all(recursive=False)]


def extract_draws(soup: BeautifulSoup) -> List[DrawRecord]:
    """遍历页面上的每张结果表，每张表用一个新的 session"""
    draws: List[DrawRecord] = []
    figures = soup.select(".post_content figure")

    for figure in figures:
        header_cells: List[str] = []
        for row in figure.select("table thead tr"):
            header_cells.extend(_cell_texts(row))

        body_rows: List[List[str]] = []
        for body in figure.select("table tbody"):
            body_rows.extend(_cell_texts(row) for row in body.find_all(recursive=False))

        draws.extend(parse_table(header_cells, body_rows))

    logger.debug("Parsed %d draw(s) from %d table(s)", len(draws), len(figures))
    return draws
