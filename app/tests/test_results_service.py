import json
import unittest
from datetime import date, datetime
from unittest import mock

import httpx
from bs4 import BeautifulSoup

from app.core.errors import ExtractionError, NotFoundError
from app.core.timeutil import TZ
from app.services import results_service
from app.tests.sample_page import SAMPLE_HTML

URL = "http://results.test/page"


class ParseResultsTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.redis = mock.AsyncMock()
        self.redis.get.return_value = None
        self.fetch = mock.AsyncMock(return_value=BeautifulSoup(SAMPLE_HTML, "html.parser"))

        patches = [
            mock.patch.object(results_service, "r", self.redis),
            mock.patch.object(results_service, "fetch_document", self.fetch),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)

    def _at(self, *args):
        p = mock.patch.object(results_service, "now_ph", return_value=TZ.localize(datetime(*args)))
        p.start()
        self.addCleanup(p.stop)

    async def test_today_is_parsed_and_cached_until_next_draw(self) -> None:
        self._at(2026, 10, 19, 14, 15)

        data = await results_service.parse_results(URL)

        self.fetch.assert_awaited_once_with(URL)
        self.assertEqual(data["date"], "10/19/2026")
        self.assertEqual(data["ULTRA-LOTTO-6-58"]["result"], "12-23-34-40-45-58")
        # 当天只保留每个 id 的最后一条
        self.assertEqual(data["3D-LOTTO"]["time"], "9:00 PM")

        self.redis.set.assert_awaited_once()
        args, kwargs = self.redis.set.await_args
        self.assertEqual(args[0], "resultsCache")
        self.assertEqual(json.loads(args[1]), data)
        self.assertEqual(kwargs["ex"], 45 * 60)

    async def test_too_soon_after_draw_skips_cache(self) -> None:
        self._at(2026, 10, 19, 10, 39)

        with self.assertLogs("app.services.results_service", level="INFO") as logs:
            data = await results_service.parse_results(URL)

        self.assertIn("ULTRA-LOTTO-6-58", data)
        self.redis.set.assert_not_awaited()
        self.assertTrue(any("Full fetch, minutes now: 39" in line for line in logs.output))

    async def test_cache_hit_skips_fetch(self) -> None:
        self._at(2026, 10, 19, 14, 15)
        cached = {"date": "10/19/2026", "6D-LOTTO": {"game_id": "6D-LOTTO", "result": "1-2-3-4-5-6"}}
        self.redis.get.return_value = json.dumps(cached)

        data = await results_service.parse_results(URL)

        self.assertEqual(data, cached)
        self.redis.get.assert_awaited_once_with("resultsCache")
        self.fetch.assert_not_awaited()

    async def test_filtered_date_never_touches_cache(self) -> None:
        self._at(2026, 10, 19, 14, 15)

        data = await results_service.parse_results(URL, filter_date=date(2024, 2, 29))

        self.assertEqual(data["date"], "02/29/2024")
        self.assertEqual(len(data["3D-LOTTO"]), 3)
        self.assertEqual([r["time"] for r in data["STL-SWER2"]], ["10:30 AM", "3:00 PM"])
        self.redis.get.assert_not_awaited()
        self.redis.set.assert_not_awaited()

    async def test_fetch_failure_becomes_extraction_error(self) -> None:
        self._at(2026, 10, 19, 14, 15)
        self.fetch.side_effect = httpx.ConnectError("boom")

        with self.assertLogs("app.services.results_service", level="ERROR"):
            with self.assertRaises(ExtractionError) as ctx:
                await results_service.parse_results(URL)

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertNotIn("boom", ctx.exception.detail)
        self.redis.set.assert_not_awaited()


class GetGameTests(unittest.TestCase):
    def test_found(self) -> None:
        collection = {"date": "10/19/2026", "6D-LOTTO": {"result": "1-2-3-4-5-6"}}
        self.assertEqual(results_service.get_game(collection, "6D-LOTTO"), {"result": "1-2-3-4-5-6"})

    def test_missing_game_and_date_key(self) -> None:
        collection = {"date": "10/19/2026"}
        for game_id in ["4D-LOTTO", "date"]:
            with self.subTest(game_id=game_id):
                with self.assertRaises(NotFoundError) as ctx:
                    results_service.get_game(collection, game_id)
                self.assertEqual(ctx.exception.status_code, 404)
                self.assertIn("no draw for it today", ctx.exception.detail)


if __name__ == "__main__":
    unittest.main()
