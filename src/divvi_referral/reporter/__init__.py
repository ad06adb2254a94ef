"""Attribution reporter: one HTTP ``POST`` per event, outcome as exception type.

Attributes:
    AttributionReporter: Reporter bound to a
        [ReporterConfig][divvi_referral.reporter.configs.ReporterConfig] and an
        optional shared ``aiohttp.ClientSession``.
    submit_referral: One-off referral submission.
    submit_attribution_event: One-off attribution-event submission.
    SubmissionResponse: Status, reason and raw body of a 2xx answer.
"""

from .configs import DEFAULT_ATTRIBUTION_URL, DEFAULT_REFERRAL_URL, ReporterConfig
from .reporter import (
    AttributionReporter,
    SubmissionResponse,
    submit_attribution_event,
    submit_referral,
)


__all__ = [
    "DEFAULT_ATTRIBUTION_URL",
    "DEFAULT_REFERRAL_URL",
    "AttributionReporter",
    "ReporterConfig",
    "SubmissionResponse",
    "submit_attribution_event",
    "submit_referral",
]
