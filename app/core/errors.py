from fastapi import HTTPException, status

GAME_NOT_FOUND_HINT = (
    "This may be because there was no draw for it today, it has yet to occur, "
    "or the game ID was misspelled."
)
PARSE_FAILURE_MESSAGE = "The server encountered an error while parsing the results."


class ValidationError(HTTPException):
    """日期参数不合法，原样返回给调用方"""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, game_id: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"The game with ID < {game_id} > could not be found. {GAME_NOT_FOUND_HINT}",
        )
        self.game_id = game_id


class ExtractionError(HTTPException):
    """拉取或解析失败；上游细节只写日志，不返回给调用方"""

    def __init__(self, detail: str = PARSE_FAILURE_MESSAGE):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
