import unittest
from datetime import datetime
from unittest import mock

import httpx

from app.core.errors import ExtractionError
from app.core.timeutil import TZ
from app.services import fetcher, results_service
from app.tests.sample_page import SAMPLE_HTML

URL = "http://results.test/page"
_RealAsyncClient = httpx.AsyncClient


class FetchDocumentTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.requests = []
        self.status = 200
        self.body = SAMPLE_HTML

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(self.status, text=self.body)

        def client_factory(**kwargs):
            return _RealAsyncClient(transport=httpx.MockTransport(handler), **kwargs)

        p = mock.patch.object(fetcher.httpx, "AsyncClient", side_effect=client_factory)
        p.start()
        self.addCleanup(p.stop)

    async def test_html_body_is_parsed(self) -> None:
        soup = await fetcher.fetch_document(URL)

        self.assertEqual(len(soup.select(".post_content figure")), 3)
        self.assertEqual(str(self.requests[0].url), URL)
        self.assertIn("Mozilla", self.requests[0].headers["User-Agent"])

    async def test_non_2xx_raises(self) -> None:
        self.status = 404
        self.body = "<html>Not Found</html>"

        with self.assertRaises(httpx.HTTPStatusError):
            await fetcher.fetch_document(URL)

    async def test_upstream_404_becomes_extraction_error(self) -> None:
        self.status = 404
        redis = mock.AsyncMock()
        redis.get.return_value = None
        now = TZ.localize(datetime(2026, 10, 19, 14, 15))

        with mock.patch.object(results_service, "r", redis), \
                mock.patch.object(results_service, "now_ph", return_value=now):
            with self.assertLogs("app.services.results_service", level="ERROR"):
                with self.assertRaises(ExtractionError) as ctx:
                    await results_service.parse_results(URL)

        self.assertEqual(ctx.exception.status_code, 500)
        redis.set.assert_not_awaited()

    async def test_page_through_service_without_mocked_parser(self) -> None:
        redis = mock.AsyncMock()
        redis.get.return_value = None
        now = TZ.localize(datetime(2026, 10, 19, 14, 15))

        with mock.patch.object(results_service, "r", redis), \
                mock.patch.object(results_service, "now_ph", return_value=now):
            data = await results_service.parse_results(URL)

        self.assertEqual(data["ULTRA-LOTTO-6-58"]["result"], "12-23-34-40-45-58")
        self.assertEqual(data["STL-SWER3"]["corporation"], "STL Visayas")
        redis.set.assert_awaited_once()


if __name__ == "__main__":
    unittest.main()
