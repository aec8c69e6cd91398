"""
HTTP client for the EV Service Center REST API.

Every request carries the stored bearer token; every failed response goes
through one place that decides whether the user should hear about it and
turns it into an `ApiError`.
"""
import logging
from typing import Any, Callable, Dict, Optional

import requests
from pydantic import ValidationError

from evservice.config import Settings, get_settings
from evservice.errors import (
    ApiError,
    GENERIC_SERVER_ERROR,
    auth_error_message,
    translate_error,
)
from evservice.notify import ErrorThrottle, Notifier
from evservice.schemas.common import ApiResponse
from evservice.storage import FileTokenStore, TokenStore

logger = logging.getLogger(__name__)

CRITICAL_PATHS = ("/login", "/register")


def is_critical_operation(method: str, path: str) -> bool:
    """Server errors on these calls are worth interrupting the user for."""
    if any(marker in path for marker in CRITICAL_PATHS):
        return True
    return "/appointments" in path and method.upper() != "GET"


def clean_params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop unset query parameters and render booleans the way the API expects."""
    if not params:
        return None
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned or None


def _json_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


class ApiClient:
    """Thin wrapper over `requests.Session` with auth and error policy."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        token_store: Optional[TokenStore] = None,
        notifier: Optional[Notifier] = None,
        session: Optional[requests.Session] = None,
        on_unauthorized: Optional[Callable[[str], None]] = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = self.settings.base_url
        if token_store is None:
            token_store = FileTokenStore(self.settings.token_file)
        self.token_store = token_store
        self.notifier = notifier or Notifier(
            throttle=ErrorThrottle(self.settings.error_throttle_seconds)
        )
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.on_unauthorized = on_unauthorized

    def _headers(self, with_json: bool) -> Dict[str, str]:
        headers = {}
        if with_json:
            headers["Content-Type"] = "application/json"
        token = self.token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        data: Any = None,
        files: Any = None,
        raw: bool = False,
    ):
        """
        Send a request and return the parsed envelope.

        With `raw=True` the `requests.Response` is returned untouched, for
        binary downloads such as invoice PDFs.
        """
        method = method.upper()
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                params=clean_params(params),
                json=json,
                data=data,
                files=files,
                headers=self._headers(with_json=files is None),
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise ApiError(translate_error(None), status=500) from exc

        if not response.ok:
            self._raise_for_response(method, path, response)

        if raw:
            return response
        return self._envelope(response)

    def _raise_for_response(self, method: str, path: str, response: requests.Response):
        status = response.status_code
        body = _json_body(response)
        if not isinstance(body, dict):
            body = {}
        error_code = body.get("error") if isinstance(body.get("error"), str) else None
        server_message = body.get("message") if isinstance(body.get("message"), str) else None

        throttle = self.notifier.throttle
        throttle_key = f"{status}-{error_code or 'generic'}"

        if throttle.should_show(throttle_key):
            if status == 401:
                self.token_store.remove()
                if self.on_unauthorized:
                    self.on_unauthorized(self.settings.login_path)
                throttle.mark(throttle_key)
                self.notifier.error(auth_error_message(error_code))
            elif status == 403:
                logger.warning("403 from %s %s: %s", method, path, body)
            elif status >= 500 and is_critical_operation(method, path):
                throttle.mark(throttle_key)
                self.notifier.error(GENERIC_SERVER_ERROR)
        else:
            logger.debug("Suppressed repeated %s for %s %s", throttle_key, method, path)

        raise ApiError(
            translate_error(status, server_message),
            status=status,
            error_code=error_code,
            reason_code=body.get("reasonCode"),
            conflicts=body.get("conflicts"),
            server_message=server_message,
            response=response,
        )

    def _envelope(self, response: requests.Response) -> ApiResponse:
        body = _json_body(response)
        if body is None:
            if response.content:
                return ApiResponse(data=response.text)
            return ApiResponse()
        if isinstance(body, dict):
            try:
                return ApiResponse.model_validate(body)
            except ValidationError as exc:
                logger.debug("Unexpected envelope shape: %s", exc)
                return ApiResponse(data=body)
        return ApiResponse(data=body)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs):
        return self.request("GET", path, params=params, **kwargs)

    def post(self, path: str, json: Any = None, **kwargs):
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Any = None, **kwargs):
        return self.request("PUT", path, json=json, **kwargs)

    def patch(self, path: str, json: Any = None, **kwargs):
        return self.request("PATCH", path, json=json, **kwargs)

    def delete(self, path: str, json: Any = None, **kwargs):
        return self.request("DELETE", path, json=json, **kwargs)

    def close(self) -> None:
        self.session.close()
