"""
HTTP client for the Memo API
"""
import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class MemoServiceError(Exception):
    """Memo API call failed (transport error or non-2xx response)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MemoService:
    """Thin wrapper over the /api/memos endpoints"""

    def __init__(self, base_url: str, timeout: float = 10.0, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def create_memo(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST a new memo; payload is {title, created_at}"""
        return self._request("POST", "/api/memos", json=payload)

    def list_memos(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/memos")

    def update_memo(self, memo_id: int, title: str, status: str) -> Dict[str, Any]:
        return self._request(
            "PUT",
            f"/api/memos/{memo_id}",
            json={"title": title, "status": status}
        )

    def delete_memo(self, memo_id: int) -> None:
        self._request("DELETE", f"/api/memos/{memo_id}")

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.exceptions.Timeout:
            logger.warning(f"{method} {url} timed out after {self.timeout}s")
            raise MemoServiceError("Tempo de resposta esgotado.")
        except requests.exceptions.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise MemoServiceError(f"Backend indisponível: {e}")

        if response.status_code >= 400:
            message = _error_message(response)
            logger.warning(f"{method} {url} -> {response.status_code}: {message}")
            raise MemoServiceError(message, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()


def _error_message(response) -> str:
    """Pull {message} out of an API error body"""
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {response.status_code}"
