"""Request client: verbs, retries, logging and response decoding."""
import asyncio
import inspect
import json
import logging
from functools import partial
from typing import Any, Awaitable, Callable, List, Mapping, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from http_request.config import settings
from http_request.domain.exceptions import TransportFailure
from http_request.domain.models import ClientConfig, RequestAttempt, build_url
from http_request.infrastructure.clients.base import HttpTransport

logger = logging.getLogger(__name__)

ErrorHook = Callable[[Optional[httpx.Response]], Any]
SleepFunc = Callable[[float], Awaitable[None]]

BODY_METHODS = ("POST", "PUT")
QUERY_METHODS = ("GET", "DELETE")


class RequestClient:
    """JSON request client bound to one configuration snapshot.

    Every verb returns the decoded JSON body, the raw body text when it is
    not JSON, or ``None`` when the request failed. Failures are reported to
    ``on_request_error`` with the response, or ``None`` when the server could
    not be reached at all.
    """

    def __init__(
        self,
        config: ClientConfig,
        on_request_error: Optional[ErrorHook] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        retry_delay: Optional[float] = None,
        sleep: Optional[SleepFunc] = None,
    ):
        config.ensure_valid()
        self.config = config
        self.on_request_error = on_request_error
        self.retry_delay = settings.retry_delay if retry_delay is None else retry_delay
        self._sleep = sleep or asyncio.sleep
        self._transport = HttpTransport(config.timeout, transport)

    async def post(
        self,
        service: str,
        body: Optional[Mapping[str, Any]] = None,
        max_attempts: Optional[int] = None,
    ) -> Any:
        return await self.request("POST", service, body, max_attempts)

    async def put(
        self,
        service: str,
        body: Optional[Mapping[str, Any]] = None,
        max_attempts: Optional[int] = None,
    ) -> Any:
        return await self.request("PUT", service, body, max_attempts)

    async def get(
        self,
        service: str,
        params: Optional[Mapping[str, Any]] = None,
        max_attempts: Optional[int] = None,
    ) -> Any:
        return await self.request("GET", service, params, max_attempts)

    async def delete(
        self,
        service: str,
        params: Optional[Mapping[str, Any]] = None,
        max_attempts: Optional[int] = None,
    ) -> Any:
        return await self.request("DELETE", service, params, max_attempts)

    async def request(
        self,
        method: str,
        service: str,
        body: Optional[Mapping[str, Any]] = None,
        max_attempts: Optional[int] = None,
    ) -> Any:
        """Send ``method`` to ``service``, retrying on transport failure.

        GET and DELETE put ``body`` in the query string; POST and PUT send it
        as a JSON payload.
        """
        method = method.upper()
        if method not in BODY_METHODS + QUERY_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if max_attempts is None:
            max_attempts = settings.default_max_attempts
        attempts = max(1, max_attempts)

        body = dict(body) if body is not None else None
        if method in QUERY_METHODS:
            url = build_url(self.config, service, body)
            payload = None
        else:
            url = build_url(self.config, service)
            payload = body if body is not None else {}

        retrying = AsyncRetrying(
            stop=stop_after_attempt(attempts),
            wait=wait_fixed(self.retry_delay),
            retry=retry_if_exception_type(TransportFailure),
            before_sleep=partial(self._log_retry, attempts),
            retry_error_callback=self._give_up,
            sleep=self._sleep,
        )

        sent: List[RequestAttempt] = []
        response = await retrying(self._send, method, url, body, payload, sent)

        if response is None:
            await self._notify_error(None)
            return None

        return await self._process_response(response, sent[-1])

    async def _send(
        self,
        method: str,
        url: str,
        body: Optional[dict],
        payload: Optional[dict],
        sent: List[RequestAttempt],
    ) -> httpx.Response:
        attempt = RequestAttempt(
            method=method, url=url, body=body, number=len(sent) + 1
        )
        sent.append(attempt)
        self._log_request(attempt)
        return await self._transport.send(method, url, json=payload)

    async def _process_response(
        self, response: httpx.Response, attempt: RequestAttempt
    ) -> Any:
        level = self.config.debug_level
        if level.logs_answer:
            logger.info(
                f"<-- {attempt.method} {attempt.url} {attempt.sent_at_label} "
                f"({attempt.elapsed_ms()} ms {response.status_code} {response.reason_phrase})"
            )
        if level.logs_answer_body:
            logger.info(f"<-- {response.text}")

        if response.status_code != 200:
            await self._notify_error(response)
            return None

        try:
            return response.json()
        except ValueError:
            return response.text

    async def _notify_error(self, response: Optional[httpx.Response]) -> None:
        if self.on_request_error is None:
            return
        result = self.on_request_error(response)
        if inspect.isawaitable(result):
            await result

    def _log_request(self, attempt: RequestAttempt) -> None:
        level = self.config.debug_level
        if level.logs_request:
            logger.info(f"--> {attempt.method} {attempt.url} {attempt.sent_at_label}")
        if level.logs_request_body:
            logger.info(f"--> {json.dumps(attempt.body or {}, default=str)}")

    def _log_retry(self, attempts: int, retry_state: RetryCallState) -> None:
        remaining = attempts - retry_state.attempt_number
        logger.warning(
            f"-- can't reach the backend, {remaining} attempt(s) left, "
            f"retrying in {self.retry_delay}s"
        )

    def _give_up(self, retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            f"-- giving up after {retry_state.attempt_number} attempt(s): {exc}"
        )
        return None
