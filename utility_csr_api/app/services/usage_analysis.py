"""
Usage analysis over an account's billing history.

Two steps, kept separate so that each can be tested on its own:

* ``select_recent_history`` picks the most recent billing cycles of one
  account out of a record sequence.
* ``classify_trend`` compares the latest usage of that window with the
  window's mean and labels it ``increasing``, ``decreasing`` or
  ``stable``.

The window size and the stable band default to ``HISTORY_WINDOW`` and
``TREND_BAND``; the service passes the configured values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from utility_csr_api.app.core.errors import NotFound
from utility_csr_api.app.schemas.billing import BillingRecord


HISTORY_WINDOW = 6
TREND_BAND = 0.10


class TrendLabel(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


@dataclass(frozen=True)
class TrendSummary:
    """Result of ``classify_trend``.

    ``average`` is the unrounded mean; use ``rounded_average`` for
    display only.
    """

    average: float
    latest: float
    label: TrendLabel

    @property
    def rounded_average(self) -> int:
        # Half up, so 882.5 shows as 883.
        return int(math.floor(self.average + 0.5))


def select_recent_history(
    account_identifier: str,
    records: Iterable[BillingRecord],
    window_size: int = HISTORY_WINDOW,
    not_found_message: str = "No billing history found",
) -> List[BillingRecord]:
    """Return the ``window_size`` most recent records of an account.

    Records are matched on ``account_identifier`` exactly (case
    sensitive) and ordered by ``issue_date`` descending.  The sort is
    stable, so records issued on the same date keep their original
    relative order.

    Raises ``NotFound`` with ``not_found_message`` when no record
    matches.
    """
    if window_size < 1:
        raise ValueError("window_size must be at least 1")
    matches = [record for record in records if record.account_identifier == account_identifier]
    if not matches:
        raise NotFound(not_found_message)
    matches.sort(key=lambda record: record.issue_date, reverse=True)
    return matches[:window_size]


def classify_trend(window: Sequence[BillingRecord], band: Optional[float] = None) -> TrendSummary:
    """Classify the latest usage of ``window`` against the window mean.

    The head of ``window`` is taken as the latest observation, so the
    window must already be ordered most recent first.  An average of
    zero always yields ``stable``.
    """
    if not window:
        raise ValueError("classify_trend requires a non-empty window")
    if band is None:
        band = TREND_BAND
    average = sum(record.usage_quantity for record in window) / len(window)
    latest = window[0].usage_quantity
    if average == 0:
        label = TrendLabel.STABLE
    elif latest > average * (1 + band):
        label = TrendLabel.INCREASING
    elif latest < average * (1 - band):
        label = TrendLabel.DECREASING
    else:
        label = TrendLabel.STABLE
    return TrendSummary(average=average, latest=latest, label=label)
