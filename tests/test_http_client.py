"""
Tests for the shared HTTP retry helper.
"""
import unittest

import httpx

from content_validator.core.http_client import _get_retry_after_seconds, get_async_client, request_with_retry


class TestRequestWithRetry(unittest.IsolatedAsyncioTestCase):

    def _client(self, handler):
        return get_async_client(timeout=5.0, transport=httpx.MockTransport(handler))

    async def test_success_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"ok": True})

        async with self._client(handler) as client:
            response = await request_with_retry(client, "GET", "https://api.test/", max_attempts=3, backoff_seconds=0)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(calls), 1)

    async def test_persistent_retry_status_returns_last_response(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(429)

        async with self._client(handler) as client:
            response = await request_with_retry(client, "POST", "https://api.test/", max_attempts=2, backoff_seconds=0)

        self.assertEqual(response.status_code, 429)
        self.assertEqual(len(calls), 2)

    async def test_non_retry_status_returned_immediately(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(404)

        async with self._client(handler) as client:
            response = await request_with_retry(client, "GET", "https://api.test/", max_attempts=3, backoff_seconds=0)

        self.assertEqual(response.status_code, 404)
        self.assertEqual(len(calls), 1)

    async def test_transport_error_reraised_after_last_attempt(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ReadTimeout("slow", request=request)

        async with self._client(handler) as client:
            with self.assertRaises(httpx.ReadTimeout):
                await request_with_retry(client, "GET", "https://api.test/", max_attempts=2, backoff_seconds=0)

        self.assertEqual(len(calls), 2)


class TestRetryAfter(unittest.TestCase):

    def test_numeric_header(self):
        self.assertEqual(_get_retry_after_seconds(httpx.Response(503, headers={"Retry-After": "2"})), 2.0)

    def test_missing_or_invalid_header(self):
        self.assertIsNone(_get_retry_after_seconds(httpx.Response(503)))
        self.assertIsNone(
            _get_retry_after_seconds(httpx.Response(503, headers={"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}))
        )


if __name__ == '__main__':
    unittest.main()
