"""MaidEasy API client.

This module defines a small client wrapper around the MaidEasy HTTP
API.  It uses the ``requests`` library internally and exposes one
method per operation:

* :meth:`join_waitlist` / :meth:`waitlist_count` – pre‑launch signups.
* :meth:`register_maid`, :meth:`list_maids`, :meth:`get_maid` – the
  provider directory, optionally filtered by city or locality.
* :meth:`register`, :meth:`login`, :meth:`logout`, :meth:`current_user` –
  account and session handling.
* :meth:`create_booking`, :meth:`list_bookings`, :meth:`get_booking`,
  :meth:`update_booking_status` – bookings.
* :meth:`set_maid_availability`, :meth:`get_company_settings`,
  :meth:`update_company_settings` – administration.

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the ``data`` member of the response envelope and ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a dictionary
with ``status_code``, ``message`` and, for validation failures,
``errors``.

After a successful :meth:`login` or :meth:`register` the session token
is remembered and sent as ``Authorization: Bearer <token>`` with every
later request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class MaidEasyAPI:
    """Client for interacting with the MaidEasy API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL including the API prefix, e.g.
                ``https://example.com/api``.
            token: Optional session token from an earlier login.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(body, error)`` where ``body`` is the full parsed
            JSON envelope on success.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return {}, None
        except requests.HTTPError as exc:
            return None, self._error_from_response(exc.response, exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_from_response(response: Optional[requests.Response], exc: Exception) -> Dict[str, Any]:
        status = response.status_code if response is not None else None
        error: Dict[str, Any] = {"status_code": status, "message": ""}
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                error["message"] = response.text
            else:
                error["message"] = body.get("message") or str(body)
                if body.get("errors"):
                    error["errors"] = body["errors"]
        if not error["message"]:
            error["message"] = str(exc)
        logger.error("API request failed (%s): %s", status, error["message"])
        return error

    def _call(self, method: str, path: str, json_body: Any | None = None) -> Result:
        body, error = self._request(method, path, json_body=json_body)
        if error:
            return None, error
        return body.get("data"), None

    # ------------------------------------------------------------------
    # Waitlist
    # ------------------------------------------------------------------
    def join_waitlist(self, name: str, email: str, company: Optional[str] = None) -> Result:
        payload: Dict[str, Any] = {"name": name, "email": email}
        if company:
            payload["company"] = company
        return self._call("POST", "/waitlist", payload)

    def waitlist_count(self) -> Tuple[Optional[int], Optional[Dict[str, Any]]]:
        data, error = self._call("GET", "/waitlist/count")
        if error:
            return None, error
        return data["count"], None

    # ------------------------------------------------------------------
    # Maids
    # ------------------------------------------------------------------
    def register_maid(self, payload: Dict[str, Any]) -> Result:
        """Register a service provider.

        Args:
            payload: Profile fields (``name``, ``email``, ``phone``,
                ``city``, ``locality`` and optionally ``address``,
                ``experience`` and ``services``).
        """
        return self._call("POST", "/maids", payload)

    def list_maids(self, *, city: Optional[str] = None, locality: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """List maids, optionally filtered by city or by locality.

        ``city`` takes precedence when both filters are given.
        """
        if city:
            path = f"/maids/city/{quote(city, safe='')}"
        elif locality:
            path = f"/maids/locality/{quote(locality, safe='')}"
        else:
            path = "/maids"
        data, error = self._call("GET", path)
        if error:
            return [], error
        return data or [], None

    def get_maid(self, maid_id: int) -> Result:
        return self._call("GET", f"/maids/{maid_id}")

    def set_maid_availability(self, maid_id: int, is_available: bool) -> Result:
        return self._call("PATCH", f"/maids/{maid_id}/availability", {"isAvailable": is_available})

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------
    def _open_session(self, path: str, payload: Dict[str, Any]) -> Result:
        body, error = self._request("POST", path, json_body=payload)
        if error:
            return None, error
        self.token = body.get("token")
        return body.get("data"), None

    def register(self, username: str, password: str, email: str, name: str) -> Result:
        payload = {"username": username, "password": password, "email": email, "name": name}
        return self._open_session("/register", payload)

    def login(self, username: str, password: str) -> Result:
        return self._open_session("/login", {"username": username, "password": password})

    def logout(self) -> Tuple[bool, Optional[Dict[str, Any]]]:
        _, error = self._request("POST", "/logout")
        if error:
            return False, error
        self.token = None
        return True, None

    def current_user(self) -> Result:
        return self._call("GET", "/user")

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def create_booking(self, payload: Dict[str, Any]) -> Result:
        """Book a maid as the logged‑in user.

        Args:
            payload: ``maidId``, ``serviceType``, ``bookingDate``,
                ``bookingTime``, ``address`` and optional ``notes``.
        """
        return self._call("POST", "/bookings", payload)

    def list_bookings(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._call("GET", "/bookings")
        if error:
            return [], error
        return data or [], None

    def get_booking(self, booking_id: int) -> Result:
        return self._call("GET", f"/bookings/{booking_id}")

    def update_booking_status(self, booking_id: int, status: str) -> Result:
        return self._call("PATCH", f"/bookings/{booking_id}/status", {"status": status})

    # ------------------------------------------------------------------
    # Company settings
    # ------------------------------------------------------------------
    def get_company_settings(self) -> Result:
        return self._call("GET", "/company-settings")

    def update_company_settings(self, payload: Dict[str, Any]) -> Result:
        return self._call("POST", "/company-settings", payload)
