from fastapi import APIRouter, Path

from app.core.config import settings
from app.core.timeutil import now_ph
from app.schemas.results import GameResultsResp
from app.services.date_check import check_date, format_date
from app.services.results_service import get_game, parse_results

router = APIRouter(prefix="/api/results", tags=["results"])

@router.get("")
async def results_today():
    url = settings.RESULTS_BY_DATE_URL + format_date(now_ph().date())
    return await parse_results(url)

@router.get("/date/{date}")
async def results_by_date(date: str = Path(..., description="Month-Day-Year, e.g. August-26-2020")):
    given = check_date(date)
    return await parse_results(settings.RESULTS_BY_DATE_URL + date, filter_date=given)

@router.get("/date/{date}/{game_id}", response_model=GameResultsResp)
async def results_by_date_and_game(date: str, game_id: str):
    given = check_date(date)
    data = await parse_results(settings.RESULTS_BY_DATE_URL + date, filter_date=given)
    return {"game_id": game_id, "results": get_game(data, game_id)}

@router.get("/{game_id}", response_model=GameResultsResp)
async def results_today_by_game(game_id: str):
    data = await parse_results(settings.RESULTS_TODAY_URL)
    return {"game_id": game_id, "results": get_game(data, game_id)}
