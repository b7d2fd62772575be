"""Blog API client.

A thin synchronous wrapper around the Blog REST API built on the
``requests`` library.  Every method returns a tuple ``(data, error)``:
on success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
Network failures are reported the same way with ``status_code`` set to
``None``, so callers never have to catch ``requests`` exceptions.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header as ``Bearer <api_key>``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BlogAPI:
    """Client for the blog API.

    ``base_url`` should include the versioned prefix, e.g.
    ``http://localhost:8000/api/v1``.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        text_body: str | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/blogs``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
            text_body: Raw body sent as ``text/plain`` (cleanup keyword).
        Returns:
            A tuple ``(data, error)``. ``data`` is the parsed JSON
            response, or ``None`` for an empty body.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        data = None
        if text_body is not None:
            headers["Content-Type"] = "text/plain; charset=utf-8"
            data = text_body.encode("utf-8")
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                data=data,
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
                    message = (
                        err_json.get("detail")
                        or err_json.get("title")
                        or err_json.get("message")
                        or str(err_json)
                    )
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
    # Blog operations
    # ------------------------------------------------------------------
    def list_blogs(self, *, eager: bool = False) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        params = {"eager": "true"} if eager else None
        data, error = self._request("GET", "/blogs", params=params)
        if error:
            return [], error
        return data or [], None

    def get_blog(self, blog_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/blogs/{blog_id}")

    def create_blog(self, name: str, handle: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/blogs", json_body={"name": name, "handle": handle})

    def update_blog(
        self, blog_id: Any, name: str, handle: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "PUT", "/blogs", json_body={"id": blog_id, "name": name, "handle": handle}
        )

    def delete_blog(self, blog_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/blogs/{blog_id}")
        return error is None, error

    def clean_all(self, keyword: str) -> Tuple[bool, Optional[Error]]:
        """Delete entries containing ``keyword`` from every blog."""
        _, error = self._request("DELETE", "/blogs/clean", text_body=keyword)
        return error is None, error

    def clean_blog(self, blog_id: Any, keyword: str) -> Tuple[bool, Optional[Error]]:
        """Delete entries containing ``keyword`` from one blog."""
        _, error = self._request("DELETE", f"/blogs/{blog_id}/clean", text_body=keyword)
        return error is None, error

    # ------------------------------------------------------------------
    # Entry operations
    # ------------------------------------------------------------------
    def list_entries(self, blog_id: Any = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        params = {"blog_id": blog_id} if blog_id is not None else None
        data, error = self._request("GET", "/entries", params=params)
        if error:
            return [], error
        return data or [], None

    def create_entry(
        self, blog_id: Any, title: str, content: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST",
            "/entries",
            json_body={"blog_id": blog_id, "title": title, "content": content},
        )

    def delete_entry(self, entry_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/entries/{entry_id}")
        return error is None, error
