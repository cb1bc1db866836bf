"""Completion Client - HTTP calls to the LLM endpoint with error classification and a single retry."""

import asyncio
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

import httpx

from pocket_translator.core import ErrorKind, TranslationError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://toolkit.rork.com/text/llm/"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_RETRY_DELAY_SECONDS = 3.0

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

DEADLINE_MESSAGE = "Request timed out. Please check your connection and try again."
NATIVE_NETWORK_MESSAGE = "Cannot connect to translation service. Please check your internet connection."
WEB_NETWORK_MESSAGE = "Connection error. Please check your internet or try refreshing the page."
WEB_BLOCKED_MESSAGE = "Connection blocked. Please try again."
CONNECTION_FAILED_MESSAGE = "Connection failed. Please check your internet and try again 💡"
MALFORMED_BODY_MESSAGE = "Invalid response from server. Please try again."

# Checked before the generic >= 500 and non-2xx fallbacks.
_STATUS_ERRORS = {
    500: (ErrorKind.SERVER_ERROR, "Server error. The translation service is experiencing issues."),
    502: (ErrorKind.SERVICE_UNAVAILABLE, "Service unavailable. Please try again in a moment."),
    503: (ErrorKind.SERVICE_UNAVAILABLE, "Service unavailable. Please try again in a moment."),
    504: (ErrorKind.TIMEOUT, "Request timed out. Try a shorter text."),
    429: (ErrorKind.RATE_LIMITED, "Too many requests. Please wait a moment."),
    400: (ErrorKind.INVALID_REQUEST, "Invalid request. Please try different text."),
    401: (ErrorKind.ACCESS_DENIED, "Access denied. Please try again."),
    403: (ErrorKind.ACCESS_DENIED, "Access denied. Please try again."),
    404: (ErrorKind.NOT_FOUND, "Translation service not found."),
}


def build_payload(system_prompt: str, user_text: str) -> dict:
    """Build the two-message chat body sent to the endpoint."""
    return {
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_text.strip()},
        ]
    }


def classify_status(status_code: int, detail: str = "") -> TranslationError:
    """
    Map a non-success HTTP status to a classified error.

    A 504 shares the TIMEOUT kind with the client-side deadline but is not
    a connectivity failure, so it is never retried.

    Args:
        status_code: HTTP status of the response.
        detail: Diagnostic text read from the error body.

    Returns:
        TranslationError for the status.
    """
    if status_code in _STATUS_ERRORS:
        kind, message = _STATUS_ERRORS[status_code]
    elif status_code >= 500:
        kind, message = ErrorKind.SERVER_ERROR, f"Server error ({status_code}). Please try again."
    else:
        kind = ErrorKind.GENERIC_FAILURE
        message = f"Translation failed ({status_code}). {detail or 'Please try again.'}"
    return TranslationError(kind=kind, message=message, status_code=status_code, detail=detail)


@dataclass
class CompletionResult:
    """Outcome of a completion call: the raw completion or a classified error."""

    text: str = ""
    error: Optional[TranslationError] = None
    attempts: int = 1

    @property
    def is_error(self) -> bool:
        return self.error is not None


class _AttemptState(Enum):
    ATTEMPT_1 = 1
    ATTEMPT_2 = 2
    DONE = 3


class CompletionClient:
    """
    Sends chat completions to the translation endpoint.

    Each attempt is bounded by its own deadline. Only a connectivity
    failure on the first attempt leads to a second one, after a fixed
    delay. Expected failures come back as CompletionResult errors; only
    programmer errors raise.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        retry_delay: float = DEFAULT_RETRY_DELAY_SECONDS,
        web_hosted: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Args:
            endpoint: URL of the completion endpoint.
            timeout: Deadline for a single attempt, in seconds.
            retry_delay: Wait before the second attempt, in seconds.
            web_hosted: Use the browser wording for network failures.
            transport: Custom httpx transport (tests use httpx.MockTransport).
            sleep: Coroutine used for the retry delay.
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.retry_delay = retry_delay
        self.web_hosted = web_hosted
        self._transport = transport
        self._sleep = sleep

    async def complete(self, system_prompt: str, user_text: str) -> CompletionResult:
        """
        Request a completion, retrying once on connectivity failures.

        Args:
            system_prompt: Instruction block for the model.
            user_text: Text to translate.

        Returns:
            CompletionResult with the trimmed completion or the final error.
        """
        payload = build_payload(system_prompt, user_text)
        state = _AttemptState.ATTEMPT_1
        result = CompletionResult()

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
        ) as client:
            while state is not _AttemptState.DONE:
                if state is _AttemptState.ATTEMPT_1:
                    result = await self._attempt(client, payload, attempt=1)
                    if result.is_error and result.error.is_retryable:
                        logger.info(
                            "Network error detected, waiting %.1f seconds before retry",
                            self.retry_delay,
                        )
                        await self._sleep(self.retry_delay)
                        state = _AttemptState.ATTEMPT_2
                    else:
                        state = _AttemptState.DONE
                else:
                    result = await self._attempt(client, payload, attempt=2)
                    if result.is_error and result.error.kind is not ErrorKind.SERVER_ERROR:
                        logger.error("Second attempt also failed: %s", result.error.message)
                        result = CompletionResult(
                            error=TranslationError(
                                kind=ErrorKind.NETWORK_ERROR,
                                message=CONNECTION_FAILED_MESSAGE,
                                connectivity=True,
                                status_code=result.error.status_code,
                                detail=result.error.message,
                            ),
                            attempts=2,
                        )
                    state = _AttemptState.DONE

        return result

    async def _attempt(self, client: httpx.AsyncClient, payload: dict, attempt: int) -> CompletionResult:
        """Run one deadline-bounded POST and classify its outcome."""
        logger.info("Translation attempt %d: %s", attempt, self.endpoint)
        logger.debug(
            "Sending request with body: %s",
            json.dumps(payload, ensure_ascii=False)[:200],
        )

        try:
            response = await asyncio.wait_for(
                client.post(self.endpoint, json=payload, headers=REQUEST_HEADERS),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            error = TranslationError(
                kind=ErrorKind.TIMEOUT,
                message=DEADLINE_MESSAGE,
                connectivity=True,
            )
        except httpx.DecodingError as exc:
            error = TranslationError(
                kind=ErrorKind.MALFORMED_RESPONSE,
                message=MALFORMED_BODY_MESSAGE,
                detail=str(exc),
            )
        except httpx.RequestError as exc:
            error = self._classify_transport_error(exc)
        else:
            logger.debug("Translation response status: %d", response.status_code)
            if response.is_success:
                result = self._parse_completion(response)
                result.attempts = attempt
                if result.is_error:
                    logger.warning("Attempt %d failed: %s", attempt, result.error.message)
                return result
            detail = self._read_error_detail(response)
            error = classify_status(response.status_code, detail)

        logger.warning("Attempt %d failed (%s): %s", attempt, error.kind.value, error.message)
        return CompletionResult(error=error, attempts=attempt)

    def _classify_transport_error(self, exc: httpx.RequestError) -> TranslationError:
        if self.web_hosted:
            message = WEB_BLOCKED_MESSAGE if "CORS" in str(exc) else WEB_NETWORK_MESSAGE
        else:
            message = NATIVE_NETWORK_MESSAGE
        return TranslationError(
            kind=ErrorKind.NETWORK_ERROR,
            message=message,
            connectivity=True,
            detail=str(exc),
        )

    @staticmethod
    def _read_error_detail(response: httpx.Response) -> str:
        """Extract diagnostic text from an error response, or "" if unreadable."""
        content_type = response.headers.get("content-type", "")
        try:
            if "application/json" in content_type:
                data = response.json()
                if isinstance(data, dict):
                    detail = data.get("error") or data.get("message") or json.dumps(data)
                else:
                    detail = json.dumps(data)
            else:
                detail = response.text
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Could not read error response: %s", exc)
            return ""

        if not isinstance(detail, str):
            detail = json.dumps(detail)
        logger.error("Translation API error response: %s", detail)
        return detail

    @staticmethod
    def _parse_completion(response: httpx.Response) -> CompletionResult:
        """Validate a 2xx body and pull out the completion text."""
        try:
            data = json.loads(response.text)
        except ValueError as exc:
            logger.error("Failed to parse JSON: %s", exc)
            return CompletionResult(error=TranslationError(
                kind=ErrorKind.MALFORMED_RESPONSE,
                message=MALFORMED_BODY_MESSAGE,
                status_code=response.status_code,
            ))

        if not isinstance(data, dict):
            return CompletionResult(error=TranslationError(
                kind=ErrorKind.MALFORMED_RESPONSE,
                message="Invalid response format",
                status_code=response.status_code,
            ))

        completion = data.get("completion")
        if not isinstance(completion, str) or not completion.strip():
            logger.error("No completion in response: %s", data)
            return CompletionResult(error=TranslationError(
                kind=ErrorKind.MALFORMED_RESPONSE,
                message="No translation received",
                status_code=response.status_code,
            ))

        return CompletionResult(text=completion.strip())
