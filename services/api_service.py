# services/api_service.py

"""
HTTP client for the church API, used by admin tooling and scripts.

Every call carries the stored bearer token. A 401 triggers exactly one
re-login with the stored credentials followed by one retry; a second 401
surfaces as an ApiError.
"""

import time
from typing import Any, Optional, Tuple

import requests

from core.logging_config import logger
from core.security import DEV_TOKEN_PREFIX


DEFAULT_TIMEOUT = 30
CONNECTION_TEST_TIMEOUT = 5


class ApiError(Exception):
    """Non-2xx response (`status` set) or network failure (`status` is None)."""

    def __init__(self, status: Optional[int], message: str, payload: Any = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.payload = payload

    def __repr__(self):
        return f"ApiError(status={self.status!r}, message={self.message!r})"


class TokenStore:
    """In-memory holder for the bearer token."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: Optional[str]):
        self._token = token

    def clear(self):
        self._token = None


class ApiService:
    def __init__(
        self,
        base_url: str,
        token_store: Optional[TokenStore] = None,
        timeout: int = DEFAULT_TIMEOUT,
        dev_mode: bool = False,
        credentials: Optional[Tuple[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store or TokenStore()
        self.timeout = timeout
        self.dev_mode = dev_mode
        self.credentials = credentials
        self.session = session or requests.Session()

    # -----------------------------------------------------
    # Auth
    # -----------------------------------------------------
    def _token(self) -> Optional[str]:
        token = self.token_store.get()
        if token is None and self.dev_mode:
            # Local development only; the server must run with DEV_AUTH_ENABLED
            token = f"{DEV_TOKEN_PREFIX}{int(time.time() * 1000)}"
            logger.warning("No stored token; using a development token")
            self.token_store.set(token)
        return token

    def auth_headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        token = self._token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def login(self, username: str, password: str) -> dict:
        """POST /api/auth/login, store the token and remember the credentials."""
        data = self._send("POST", "/api/auth/login", json={"username": username, "password": password}, auth=False)
        self.token_store.set(data.get("token"))
        self.credentials = (username, password)
        return data

    def logout(self):
        self.token_store.clear()

    def _relogin(self) -> bool:
        if not self.credentials:
            return False
        username, password = self.credentials
        try:
            self.login(username, password)
            return True
        except ApiError as e:
            logger.warning(f"Re-authentication failed: {e.message}")
            return False

    # -----------------------------------------------------
    # Requests
    # -----------------------------------------------------
    def _send(self, method: str, path: str, *, auth: bool = True, timeout: Optional[int] = None, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        headers = self.auth_headers() if auth else {"Content-Type": "application/json"}

        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                timeout=timeout or self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(None, f"Network error: {e}")

        payload = self._parse(response)

        if not response.ok:
            raise ApiError(response.status_code, self._error_message(response, payload), payload)

        return payload

    def request(self, method: str, path: str, **kwargs) -> Any:
        try:
            return self._send(method, path, **kwargs)
        except ApiError as e:
            if e.status != 401 or not self._relogin():
                if e.status == 401:
                    logger.error("Authentication error - user might need to log in again")
                raise

        # one retry with the fresh token
        return self._send(method, path, **kwargs)

    def get(self, path: str, **kwargs) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, json: Any = None, **kwargs) -> Any:
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Any = None, **kwargs) -> Any:
        return self.request("PUT", path, json=json, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request("DELETE", path, **kwargs)

    def test_connection(self) -> bool:
        """GET /api/test-connection with a short timeout. Never raises."""
        try:
            data = self._send("GET", "/api/test-connection", auth=False, timeout=CONNECTION_TEST_TIMEOUT)
            return bool(data and data.get("success"))
        except ApiError as e:
            logger.warning(f"Connection test failed: {e.message}")
            return False

    # -----------------------------------------------------
    # Helpers
    # -----------------------------------------------------
    @staticmethod
    def _parse(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _error_message(response: requests.Response, payload: Any) -> str:
        if isinstance(payload, dict):
            for key in ("error", "detail", "message"):
                if payload.get(key):
                    return str(payload[key])
        return f"HTTP {response.status_code}"
