from typing import Any, Dict, Iterable

from app.schemas.results import DrawRecord


def group_results(records: Iterable[DrawRecord], date: str, keep_all: bool = False) -> Dict[str, Any]:
    """
    按 game_id 分组，返回可直接 json.dumps 的 dict，date 放在最前面。
      keep_all=True  -> { game_id: [record, ...] }（按日期查询，同一天同一 id 可能出现多次）
      keep_all=False -> { game_id: record }（当天页面，每个 id 只取最后一条）
    """
    grouped: Dict[str, Any] = {"date": date}
    for rec in records:
        item = rec.model_dump()
        if keep_all:
            grouped.setdefault(rec.game_id, []).append(item)
        else:
            grouped[rec.game_id] = item
    return grouped
