from typing import List, Union
from pydantic import BaseModel, Field

class DrawRecord(BaseModel):
    game_id: str = Field(..., description="normalized game id, e.g. ULTRA-LOTTO-6-58 (formerly `gameId`)")
    description: str = ""
    time: str
    corporation: str = ""
    result: str

class GameResultsResp(BaseModel):
    game_id: str = Field(..., description="requested game id (formerly `gameId`)")
    results: Union[DrawRecord, List[DrawRecord]]
