import unittest

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from careercraft.core.rate_limit import rate_limit


def _limited_app() -> FastAPI:
    limiter = Limiter(key_func=get_remote_address)
    app = FastAPI()
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.get("/limited")
    @limiter.limit("1/minute")
    async def limited(request: Request):
        _ = request
        return {"ok": True}

    return app


class RateLimitTests(unittest.TestCase):
    def test_second_request_in_window_returns_429(self):
        client = TestClient(_limited_app())

        first = client.get("/limited")
        second = client.get("/limited")

        self.assertEqual(first.status_code, 200)
        self.assertEqual(second.status_code, 429)

    def test_disabled_limiter_leaves_route_untouched(self):
        async def handler(request: Request):
            return request

        # RATE_LIMIT_ENABLED=0 in the test environment.
        self.assertIs(rate_limit()(handler), handler)


if __name__ == "__main__":
    unittest.main()
