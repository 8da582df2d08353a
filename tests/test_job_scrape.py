import asyncio
import unittest

import httpx
from fastapi.testclient import TestClient

from careercraft.main import app
from careercraft.schemas.jobs import JobScrapeResult
from careercraft.services.job_scrape import extract_job_fields, scrape_job

JOB_PAGE = """
<html>
  <head>
    <TITLE>  Senior Backend Engineer - Acme  </TITLE>
    <meta name="description" content="Build Python services for payments.">
  </head>
  <body><h1>Senior Backend Engineer</h1></body>
</html>
"""


def _run(coro):
    return asyncio.run(coro)


class ExtractJobFieldsTests(unittest.TestCase):
    def test_title_and_meta_description(self):
        result = extract_job_fields(JOB_PAGE)
        self.assertEqual(result.title, "Senior Backend Engineer - Acme")
        self.assertEqual(result.jd, "Build Python services for payments.")
        self.assertIsNone(result.company)
        self.assertIsNone(result.location)

    def test_single_quoted_meta(self):
        result = extract_job_fields("<meta name='description' content='Remote role'>")
        self.assertIsNone(result.title)
        self.assertEqual(result.jd, "Remote role")

    def test_meta_with_attributes_in_other_order_is_not_matched(self):
        result = extract_job_fields('<meta content="Hidden" name="description">')
        self.assertEqual(result.jd, "")

    def test_js_rendered_shell_yields_empty_fields(self):
        result = extract_job_fields('<div id="root"></div><script src="/app.js"></script>')
        self.assertEqual(result, JobScrapeResult())


class ScrapeJobTests(unittest.TestCase):
    def test_fetch_error_returns_empty_result(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async def scenario():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await scrape_job("https://jobs.example.com/1", client=client)

        result = _run(scenario())
        self.assertEqual(result.model_dump(exclude_none=True), {"jd": ""})

    def test_error_status_page_is_still_parsed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="<title>Not Found</title>")

        async def scenario():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await scrape_job("https://jobs.example.com/missing", client=client)

        result = _run(scenario())
        self.assertEqual(result.title, "Not Found")
        self.assertEqual(result.jd, "")

    def test_successful_fetch(self):
        def handler(request: httpx.Request) -> httpx.Response:
            self.assertEqual(str(request.url), "https://jobs.example.com/42")
            return httpx.Response(200, text=JOB_PAGE)

        async def scenario():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await scrape_job("https://jobs.example.com/42", client=client)

        result = _run(scenario())
        self.assertEqual(result.title, "Senior Backend Engineer - Acme")


class JobScrapeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_missing_url_is_400(self):
        response = self.client.get("/api/job-scrape")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Missing url"})

    def test_unfetchable_url_returns_empty_result_with_200(self):
        response = self.client.get("/api/job-scrape", params={"url": "not-a-url"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"jd": ""})

    def test_very_long_url_is_attempted_not_rejected(self):
        response = self.client.get("/api/job-scrape", params={"url": "not-a-url-" + "x" * 5000})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"jd": ""})


if __name__ == "__main__":
    unittest.main()
