"""College API client.

This module defines a small client wrapper around the lecturer REST
API served by ``college_api``.  It uses the ``requests`` library and
exposes one method per lecturer operation:

* :meth:`list_lecturers` – return all lecturers.
* :meth:`get_lecturer` – fetch a single lecturer by its identifier.
* :meth:`create_lecturer` – create a lecturer.
* :meth:`update_lecturer` – replace every field of a lecturer.
* :meth:`delete_lecturer` – delete a lecturer.
* :meth:`search_lecturers` – list the lecturers of a department.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  A lecturer that does not
exist is reported by :meth:`get_lecturer` as ``(None, None)``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class CollegeAPI:
    """Client for the lecturer endpoints of the college API."""

    LECTURERS_PATH = "/api/v1/lecturers"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            api_key: Optional token sent as ``Authorization: Bearer <api_key>``
                for deployments behind an authenticating proxy.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response (``None`` for empty bodies) and ``error`` is
            ``None`` on success.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
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
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _lecturer_path(self, lecturer_id: Any) -> str:
        return f"{self.LECTURERS_PATH}/{lecturer_id}"

    # ------------------------------------------------------------------
    # Lecturer operations
    # ------------------------------------------------------------------
    def list_lecturers(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all lecturers."""
        data, error = self._request("GET", f"{self.LECTURERS_PATH}/")
        if error:
            return [], error
        return data or [], None

    def get_lecturer(self, lecturer_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve a single lecturer.

        Returns ``(None, None)`` when the lecturer does not exist.
        """
        data, error = self._request("GET", self._lecturer_path(lecturer_id))
        if error:
            if error["status_code"] == 404:
                return None, None
            return None, error
        return data, None

    def create_lecturer(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a lecturer.

        Args:
            payload: Lecturer fields; ``name`` and ``email`` are required.
        """
        return self._request("POST", f"{self.LECTURERS_PATH}/", json_body=payload)

    def update_lecturer(
        self, lecturer_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Replace every field of a lecturer.

        Optional fields absent from ``payload`` are cleared on the server.
        """
        return self._request("PUT", self._lecturer_path(lecturer_id), json_body=payload)

    def delete_lecturer(self, lecturer_id: Any) -> Tuple[bool, Optional[ApiError]]:
        """Delete a lecturer.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._lecturer_path(lecturer_id))
        if error:
            return False, error
        return True, None

    def search_lecturers(self, department: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve the lecturers of ``department`` (exact match)."""
        data, error = self._request(
            "GET", f"{self.LECTURERS_PATH}/search", params={"department": department}
        )
        if error:
            return [], error
        return data or [], None
