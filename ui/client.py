"""HTTP client for the practice API, used by the Streamlit page."""

from typing import Any, Mapping

import requests
from pydantic import ValidationError as PydanticValidationError

from app.schemas.swimming_practice import SwimmingPracticeResponse


class PracticeApiError(Exception):
    """Raised when the API cannot be reached or rejects a request."""

    def __init__(self, message: str, status_code: int | None = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class PracticeApiClient:
    """Thin wrapper around the two practice endpoints."""

    def __init__(self, base_url: str, timeout: float = 10.0, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = session or requests.Session()

    @property
    def practices_url(self) -> str:
        return f"{self.base_url}/api/v1/practices"

    def create_practice(self, payload: Mapping[str, Any]) -> SwimmingPracticeResponse:
        data = self._request("POST", json=dict(payload))
        return self._parse(data)

    def get_practices(self) -> list[SwimmingPracticeResponse]:
        data = self._request("GET")
        if not isinstance(data, list):
            raise PracticeApiError("Unexpected response: expected a list of practices", payload=data)
        return [self._parse(item) for item in data]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, **kwargs) -> Any:
        try:
            resp = self.http.request(method, self.practices_url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise PracticeApiError(f"Backend not reachable: {e}") from e

        try:
            body = resp.json()
        except ValueError:
            body = None

        if resp.status_code >= 400:
            detail = body.get("detail") if isinstance(body, dict) else resp.text
            raise PracticeApiError(f"{resp.status_code}: {detail}", status_code=resp.status_code, payload=body)
        return body

    @staticmethod
    def _parse(data: Any) -> SwimmingPracticeResponse:
        try:
            return SwimmingPracticeResponse.model_validate(data)
        except PydanticValidationError as e:
            raise PracticeApiError(f"Unexpected practice payload: {e}", payload=data) from e
