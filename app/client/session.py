# app/client/session.py
"""
Python client for the dashboard API.

Keeps the access token on disk, mirrors the logged-in identity, and
notifies subscribers whenever it changes. The expiry check done here is
only a convenience; the server re-verifies every token.
"""

import json
import logging
import os
import time
from pathlib import Path
from typing import Callable, List, Optional

import jwt
import requests

from app.client.notifications import ToastService

logger = logging.getLogger(__name__)

DEFAULT_API_URL = os.getenv("DASHBOARD_API_URL", "http://localhost:3000/api")
DEFAULT_TOKEN_PATH = Path.home() / ".admin-dashboard" / "auth_token.json"


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class TokenStore:
    """File-backed token storage."""

    def __init__(self, path: Path = DEFAULT_TOKEN_PATH):
        self.path = Path(path)

    def get(self) -> Optional[str]:
        try:
            data = json.loads(self.path.read_text())
        except (OSError, ValueError):
            return None
        if not isinstance(data, dict):
            return None
        return data.get("auth_token")

    def set(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"auth_token": token}))

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass


def user_from_token(token: str, now: Optional[float] = None) -> Optional[dict]:
    """Identity claims of an unexpired token, or None. Signature is not checked."""
    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError:
        return None

    exp = payload.get("exp")
    if exp is not None and exp < (now if now is not None else time.time()):
        return None
    if not payload.get("id"):
        return None
    return {
        "id": payload["id"],
        "email": payload.get("email"),
        "role": payload.get("role"),
        "name": payload.get("name", ""),
        "createdAt": payload.get("createdAt"),
    }


class AuthSession:
    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        store: Optional[TokenStore] = None,
        http: Optional[requests.Session] = None,
        toasts: Optional[ToastService] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.store = store or TokenStore()
        self.http = http or requests.Session()
        self.toasts = toasts
        self.timeout = timeout
        self._subscribers: List[Callable[[Optional[dict]], None]] = []
        self._user = self._load_user_from_token()

    # auth state

    @property
    def user(self) -> Optional[dict]:
        return self._user

    @property
    def is_logged_in(self) -> bool:
        return self._user is not None

    @property
    def is_admin(self) -> bool:
        return self._user is not None and self._user.get("role") == "admin"

    def subscribe(self, callback: Callable[[Optional[dict]], None]) -> Callable[[], None]:
        """
        Register a callback fired with the current user now and on every
        auth change afterwards. Returns an unsubscribe function.
        """
        self._subscribers.append(callback)
        callback(self._user)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set_user(self, user: Optional[dict]) -> None:
        self._user = user
        for callback in list(self._subscribers):
            callback(user)

    def _load_user_from_token(self) -> Optional[dict]:
        token = self.store.get()
        if not token:
            return None
        user = user_from_token(token)
        if user is None:
            self.store.clear()
        return user

    def get_token(self) -> Optional[str]:
        return self.store.get()

    # transport

    def _request(self, method: str, path: str, auth: bool = True, **kwargs) -> dict:
        headers = kwargs.pop("headers", {})
        token = self.get_token() if auth else None
        if token:
            headers["Authorization"] = f"Bearer {token}"

        response = self.http.request(
            method, f"{self.base_url}{path}", headers=headers, timeout=self.timeout, **kwargs
        )
        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code >= 400:
            if not isinstance(body, dict):
                body = {}
            message = body.get("detail") or body.get("message") or response.reason or "Request failed"
            if self.toasts is not None:
                self.toasts.error(message)
            raise ApiError(response.status_code, message)
        return body

    def _store_auth(self, body: dict) -> dict:
        self.store.set(body["token"])
        self._set_user(body["user"])
        return body

    # auth endpoints

    def register(self, name: str, email: str, password: str) -> dict:
        body = self._request(
            "POST", "/auth/register", auth=False,
            json={"name": name, "email": email, "password": password},
        )
        return self._store_auth(body)

    def login(self, email: str, password: str) -> dict:
        body = self._request("POST", "/auth/login", auth=False, json={"email": email, "password": password})
        return self._store_auth(body)

    def logout(self) -> None:
        self.store.clear()
        self._set_user(None)

    def me(self) -> dict:
        return self._request("GET", "/auth/me")["user"]

    # admin endpoints

    def list_users(self) -> List[dict]:
        return self._request("GET", "/admin/users")["users"]

    def create_user(self, email: str, password: str, role: str = "user", name: str = "") -> dict:
        body = self._request(
            "POST", "/admin/users",
            json={"email": email, "password": password, "role": role, "name": name},
        )
        return body["user"]

    def delete_user(self, user_id: str) -> str:
        return self._request("DELETE", f"/admin/users/{user_id}")["message"]

    def update_role(self, user_id: str, role: str) -> dict:
        return self._request("PATCH", f"/admin/users/{user_id}/role", json={"role": role})["user"]

    def analytics(self) -> dict:
        return self._request("GET", "/analytics")
