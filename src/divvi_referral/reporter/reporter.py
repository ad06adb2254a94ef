"""
Submission of attribution events to the tracking service.

Each call issues exactly one ``POST`` with a JSON body built from the event
and classifies the outcome:

* **2xx** -- returns a [SubmissionResponse][divvi_referral.reporter.reporter.SubmissionResponse].
* **4xx** -- raises [ClientError][divvi_referral.core.exceptions.ClientError];
  resending the same request will fail again.
* **anything else** -- raises
  [RetryableServerError][divvi_referral.core.exceptions.RetryableServerError].
* **no response** -- the ``aiohttp.ClientError`` or ``OSError`` propagates
  unchanged.

There is no retry loop, no backoff, and no timeout: the session is created
with an unbounded ``aiohttp.ClientTimeout``. Retry policy belongs to the
caller.

Examples:
    ```python
    event = TransactionAttribution(tx_hash=tx_hash, chain_id=42220)
    try:
        await submit_referral(event)
    except RetryableServerError:
        ...  # schedule a retry
    ```
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

import aiohttp

from divvi_referral.core.exceptions import ClientError, RetryableServerError
from divvi_referral.core.logger import Logger
from divvi_referral.utils.http import read_limited_text, read_text

from .configs import ReporterConfig


if TYPE_CHECKING:
    from divvi_referral.models.event import AttributionEvent


_HEADERS = {"Content-Type": "application/json"}

logger = Logger("divvi_referral.reporter")


@dataclass(frozen=True, slots=True)
class SubmissionResponse:
    """A successful (2xx) answer from the tracking endpoint.

    Attributes:
        status: HTTP status code.
        reason: HTTP reason phrase.
        body: Complete response body text, unparsed and never truncated.
    """

    status: int
    reason: str
    body: str


class AttributionReporter:
    """Posts attribution events to the referral and attribution endpoints.

    Args:
        config: Endpoints and limits. Defaults to the production endpoints.
        session: Optional externally owned ``aiohttp.ClientSession``. When
            given it is reused and never closed here; otherwise every call
            opens and closes its own session.

    Examples:
        ```python
        reporter = AttributionReporter(ReporterConfig.from_yaml("reporter.yaml"))
        await reporter.submit_referral(
            MessageAttribution(message=message, signature=signature, chain_id=10)
        )
        ```
    """

    def __init__(
        self,
        config: ReporterConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config or ReporterConfig()
        self._session = session

    @property
    def config(self) -> ReporterConfig:
        return self._config

    async def submit_referral(self, event: AttributionEvent) -> SubmissionResponse:
        """Submit *event* to its ``base_url`` or the configured referral endpoint.

        Raises:
            ClientError: On a 4xx response.
            RetryableServerError: On any other non-2xx response.
            aiohttp.ClientError: On transport failure, unchanged.
        """
        return await self._submit(event, event.base_url or self._config.referral_url)

    async def submit_attribution_event(self, event: AttributionEvent) -> SubmissionResponse:
        """Submit *event* to its ``base_url`` or the configured attribution endpoint.

        Same outcome contract as
        [submit_referral()][divvi_referral.reporter.reporter.AttributionReporter.submit_referral].
        """
        return await self._submit(event, event.base_url or self._config.attribution_url)

    async def _submit(self, event: AttributionEvent, url: str) -> SubmissionResponse:
        body = json.dumps(event.to_payload())
        if self._session is not None:
            return await self._post(self._session, url, body, event.chain_id)
        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout()) as session:
            return await self._post(session, url, body, event.chain_id)

    async def _post(
        self,
        session: aiohttp.ClientSession,
        url: str,
        body: str,
        chain_id: int,
    ) -> SubmissionResponse:
        async with session.post(url, data=body, headers=_HEADERS) as resp:
            status = resp.status
            reason = resp.reason or ""
            if HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES:
                text = await read_text(resp)
            else:
                text = await read_limited_text(resp, self._config.max_body_size)

        if HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES:
            logger.info("referral_submitted", url=url, status=status, chain_id=chain_id)
            return SubmissionResponse(status=status, reason=reason, body=text)

        if HTTPStatus.BAD_REQUEST <= status < HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.warning("referral_rejected", url=url, status=status, body=text)
            raise ClientError(status, reason, text)

        logger.warning("referral_server_error", url=url, status=status, reason=reason)
        raise RetryableServerError(status, reason)


async def submit_referral(
    event: AttributionEvent,
    *,
    config: ReporterConfig | None = None,
    session: aiohttp.ClientSession | None = None,
) -> SubmissionResponse:
    """Submit *event* to the referral endpoint with a one-off reporter."""
    return await AttributionReporter(config, session=session).submit_referral(event)


async def submit_attribution_event(
    event: AttributionEvent,
    *,
    config: ReporterConfig | None = None,
    session: aiohttp.ClientSession | None = None,
) -> SubmissionResponse:
    """Submit *event* to the attribution-event endpoint with a one-off reporter."""
    return await AttributionReporter(config, session=session).submit_attribution_event(event)
