"""Utility CSR API client.

This module defines a small client wrapper around the utility
customer‑service API.  It is used by smoke scripts and by services that
want to call the CSR tools directly instead of going through the voice
platform.  The client uses the ``requests`` library internally.

The client exposes one method per tool:

* :meth:`check_balance` – balance lookup by phone fragment or account number.
* :meth:`check_outages` – outage status for a zip code.
* :meth:`check_meter` – latest meter readings of an account.
* :meth:`analyze_meter` – usage trend over recent billing cycles.
* :meth:`analyze_bills` – recent billing history.
* :meth:`create_ticket` – open a support ticket.
* :meth:`send_tool_calls` – post raw tool calls to the webhook.

Every method returns a ``(data, error)`` tuple.  On success ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a dictionary
with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class CSRUtilitiesAPI:
    """Client for the utility customer‑service API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            prefix: Optional mount prefix the service runs under
                (``API_PREFIX`` on the server), e.g. ``/api/v1``.
            timeout: Request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/health``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------
    def health(self) -> Result:
        return self._request("GET", "/health")

    def check_balance(self, utility: str, value: str, identifier: str = "account_number") -> Result:
        """Look up a balance.  Use ``identifier="phone"`` for phone fragments."""
        return self._request(
            "GET",
            "/csr-utilities/check-balance",
            params={"utility": utility, "identifier": identifier, "value": value},
        )

    def check_outages(self, utility: str, zip_code: str) -> Result:
        return self._request(
            "GET", "/csr-utilities/check-outages", params={"utility": utility, "zip_code": zip_code}
        )

    def check_meter(self, utility: str, account_number: str) -> Result:
        return self._request(
            "GET", "/csr-utilities/check-meter", params={"utility": utility, "account_number": account_number}
        )

    def analyze_meter(self, utility: str, account_number: str) -> Result:
        return self._request(
            "GET", "/csr-utilities/analyze-meter", params={"utility": utility, "account_number": account_number}
        )

    def analyze_bills(self, utility: str, account_number: str) -> Result:
        return self._request(
            "GET", "/csr-utilities/analyze-bills", params={"utility": utility, "account_number": account_number}
        )

    def create_ticket(
        self,
        utility: str,
        account_number: str,
        issue_type: str,
        description: str,
        priority: Optional[str] = None,
    ) -> Result:
        body = {
            "utility": utility,
            "account_number": account_number,
            "issue_type": issue_type,
            "description": description,
        }
        if priority:
            body["priority"] = priority
        return self._request("POST", "/csr-utilities/create-ticket", json_body=body)

    def send_tool_calls(self, tool_calls: List[Dict[str, Any]]) -> Result:
        """Post tool calls in the voice platform's envelope.

        ``tool_calls`` items look like
        ``{"id": "call_1", "function": {"name": "checkBalance", "arguments": {...}}}``.
        """
        return self._request(
            "POST",
            "/csr-utilities/tool-calls",
            json_body={"message": {"type": "tool-calls", "toolCalls": tool_calls}},
        )
