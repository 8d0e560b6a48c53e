# -*- coding: utf-8 -*-
"""
Reports API Client - transport for disaster report submissions.
==============================================================

Handles authentication tokens and sends assembled reports to the backend
as multipart/form-data.
"""

import json
import os
from contextlib import ExitStack
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

import requests
import urllib3

from models.submission import SubmissionRecord
from services.exceptions import (
    ApiException, AuthenticationException, NetworkException, ValidationException
)
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    API connection settings.

    Values left as None are loaded from Config (which reads .env):
        API_BASE_URL=http://localhost:5000/api
        API_TIMEOUT=30
    """
    base_url: str = None
    timeout: int = None
    upload_timeout: int = None
    verify_ssl: bool = None
    refresh_margin_seconds: int = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.upload_timeout is None:
            self.upload_timeout = Config.API_UPLOAD_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL
        if self.refresh_margin_seconds is None:
            self.refresh_margin_seconds = Config.TOKEN_REFRESH_MARGIN_SECONDS

        if not self.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class ReportsApiClient:
    """
    Client for the disaster reports backend.

    Usage:
        client = ReportsApiClient(ApiConfig(base_url="http://localhost:5000/api"))
        client.login("reporter@example.org", "secret")
        receipt = client.submit_report(record)
    """

    def __init__(self, config: Optional[ApiConfig] = None,
                 access_token: Optional[str] = None, refresh_token: Optional[str] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.access_token: Optional[str] = None
        self.refresh_token: Optional[str] = refresh_token
        self.token_expires_at: Optional[datetime] = None
        if access_token:
            self.set_access_token(access_token)

    # ==================== Authentication ====================

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Log in and keep the returned tokens.

        Returns:
            Auth response (user + tokens)
        """
        data = self._post_auth("/Auth/login", {"email": email, "password": password})
        self._store_tokens(data)
        logger.info(f"Logged in as {email}")
        return data

    def set_access_token(self, token: str, expires_in: int = 3600):
        """Use a token obtained elsewhere (e.g. an existing user session)."""
        self.access_token = token
        self.token_expires_at = datetime.now() + timedelta(seconds=expires_in)
        logger.debug(f"Access token updated externally (expires in {expires_in}s)")

    def refresh_access_token(self) -> bool:
        """
        Refresh the access token using the refresh token.

        Returns:
            True if refreshed
        """
        if not self.refresh_token:
            logger.warning("No refresh token available")
            return False

        try:
            data = self._post_auth("/Auth/refresh", {"refreshToken": self.refresh_token})
        except (ApiException, NetworkException) as e:
            logger.error(f"Token refresh failed: {e}")
            return False

        self._store_tokens(data)
        logger.info("Token refreshed")
        return True

    def logout(self):
        """Drop the session locally; tell the backend when possible."""
        if self.refresh_token:
            try:
                self._post_auth("/Auth/logout", {"refreshToken": self.refresh_token})
            except (ApiException, NetworkException) as e:
                logger.warning(f"API logout failed: {e}")
        self.access_token = None
        self.refresh_token = None
        self.token_expires_at = None

    def _store_tokens(self, data: Dict[str, Any]):
        self.access_token = data["accessToken"]
        self.refresh_token = data.get("refreshToken", self.refresh_token)
        expires_in = data.get("expiresIn", 3600)
        self.token_expires_at = datetime.now() + timedelta(seconds=expires_in)

    def _post_auth(self, endpoint: str, body: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = requests.post(
                f"{self.base_url}{endpoint}",
                json=body,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()
            return response.json() if response.text else {}
        except requests.exceptions.HTTPError as e:
            raise self._http_error(e, "POST", endpoint)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)

    def _ensure_valid_token(self):
        """Make sure the token is usable before a request."""
        if not self.access_token:
            raise AuthenticationException()

        if self.token_expires_at:
            time_until_expiry = (self.token_expires_at - datetime.now()).total_seconds()
            if time_until_expiry < self.config.refresh_margin_seconds:
                logger.info("Token expiring soon, refreshing...")
                if not self.refresh_access_token() and time_until_expiry <= 0:
                    self.access_token = None
                    raise AuthenticationException("Session expired")

    def _headers(self, json_body: bool = True) -> Dict[str, str]:
        self._ensure_valid_token()
        headers = {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json"
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    # ==================== Requests ====================

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request with error mapping.

        Returns:
            Response JSON data
        """
        url = f"{self.base_url}{endpoint}"
        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.debug(f"[API REQ] Params: {params}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()
            logger.info(f"[API RES] {response.status_code} {endpoint}")
            return response.json() if response.text else None

        except requests.exceptions.HTTPError as e:
            raise self._http_error(e, method, endpoint)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)

    def _http_error(self, error: requests.exceptions.HTTPError, method: str, endpoint: str) -> Exception:
        status_code = error.response.status_code if error.response is not None else 0
        response_data = {}
        try:
            response_data = error.response.json() if error.response is not None else {}
        except (ValueError, AttributeError):
            pass
        logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")

        message = response_data.get("message") if isinstance(response_data, dict) else None
        if status_code == 400 and isinstance(response_data, dict) and response_data.get("errors"):
            errors = response_data["errors"]
            return ValidationException(
                message=message or "Failed to submit report. Please try again.",
                errors=errors if isinstance(errors, list) else [errors],
                context=endpoint
            )
        if status_code == 401:
            return AuthenticationException(message or str(error), context=endpoint)
        return ApiException(
            message=message or str(error),
            status_code=status_code,
            response_data=response_data if isinstance(response_data, dict) else {},
            context=endpoint
        )

    # ==================== Reports ====================

    def submit_report(self, record: SubmissionRecord) -> Dict[str, Any]:
        """
        Submit a disaster impact report.

        Endpoint: POST /reports (multipart/form-data)
        Structured values (location, tag lists) are sent as JSON strings and
        each attachment as a ``photos`` part.

        Returns:
            ``{id, status, submittedAt, estimatedResponseTime}``
        """
        endpoint = "/reports"
        url = f"{self.base_url}{endpoint}"
        headers = self._headers(json_body=False)

        logger.info(
            f"[API REQ] POST {endpoint} ref={record.reference_number} "
            f"photos={len(record.attachments)}"
        )

        try:
            with ExitStack() as stack:
                parts = self._form_fields(record)
                parts.extend(self._photo_parts(record, stack))
                response = requests.post(
                    url,
                    files=parts,
                    headers=headers,
                    timeout=self.config.upload_timeout,
                    verify=self.config.verify_ssl
                )
            response.raise_for_status()
            result = response.json() if response.text else {}
            logger.info(f"[API RES] {response.status_code} {endpoint} id={result.get('id')}")
            return result

        except requests.exceptions.HTTPError as e:
            raise self._http_error(e, "POST", endpoint)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error during report upload: {e}")
            raise NetworkException(message=str(e), original_error=e)

    def get_report(self, report_id: str) -> Dict[str, Any]:
        """Get a specific report by ID."""
        return self._request("GET", f"/reports/{report_id}")

    @staticmethod
    def _form_fields(record: SubmissionRecord) -> List[Tuple[str, Tuple[None, str]]]:
        parts = [("referenceNumber", (None, record.reference_number))]
        for key, value in record.to_payload().items():
            if isinstance(value, (dict, list)):
                text = json.dumps(value, ensure_ascii=False)
            elif isinstance(value, bool):
                text = "true" if value else "false"
            elif value is None:
                text = ""
            else:
                text = str(value)
            parts.append((key, (None, text)))
        return parts

    @staticmethod
    def _photo_parts(record: SubmissionRecord, stack: ExitStack) -> List[Tuple[str, tuple]]:
        parts = []
        for attachment in record.attachments:
            handle = attachment.handle
            if isinstance(handle, (str, os.PathLike)):
                handle = stack.enter_context(open(handle, "rb"))
            parts.append(("photos", (attachment.display_name, handle, attachment.mime_type)))
        return parts
