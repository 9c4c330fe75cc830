"""
Async HTTP client for the record store API.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..config import settings
from .alerts import ReminderSnapshot

logger = logging.getLogger(__name__)

COLLECTIONS = ("medications", "reminders", "vitals", "appointments")

class RecordStoreError(Exception):
    """
    Raised when a record store call fails.

    Attributes:
        message: The store's ``error`` text or a transport error description
        status_code: HTTP status, or None when no response was received
    """
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

class RecordStoreClient:
    """
    Thin wrapper over the REST surface of the record store.

    Args:
        base_url: API root, e.g. ``http://localhost:8000/api``
        timeout: Per-request timeout in seconds
        transport: Optional httpx transport, used to stub the network in tests
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_url,
            timeout=timeout if timeout is not None else settings.request_timeout_seconds,
            transport=transport
        )

    async def __aenter__(self) -> "RecordStoreClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise RecordStoreError(f"{method} {path} failed: {str(e)}") from e

        if response.is_error:
            try:
                message = response.json().get("error", response.text)
            except ValueError:
                message = response.text
            raise RecordStoreError(message, status_code=response.status_code)

        return response.json()

    @staticmethod
    def _collection_path(collection: str) -> str:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
        return f"/{collection}"

    async def list_records(self, collection: str) -> List[Dict[str, Any]]:
        """Fetch every record of a collection in its default order"""
        return await self._request("GET", self._collection_path(collection))

    async def get_record(self, collection: str, record_id: int) -> Dict[str, Any]:
        """Fetch a single record"""
        return await self._request("GET", f"{self._collection_path(collection)}/{record_id}")

    async def create_record(self, collection: str, fields: Dict[str, Any]) -> int:
        """Create a record and return the ID assigned by the store"""
        body = await self._request("POST", self._collection_path(collection), json=fields)
        return body["id"]

    async def update_record(self, collection: str, record_id: int, fields: Dict[str, Any]) -> None:
        """Replace the fields of a record"""
        await self._request("PUT", f"{self._collection_path(collection)}/{record_id}", json=fields)

    async def delete_record(self, collection: str, record_id: int) -> None:
        """Delete a record"""
        await self._request("DELETE", f"{self._collection_path(collection)}/{record_id}")

    async def list_reminders(self) -> List[ReminderSnapshot]:
        """
        Fetch all reminders as snapshots for the alert loop

        Raises:
            RecordStoreError: If the request fails or a record is malformed
        """
        records = await self.list_records("reminders")
        try:
            return [ReminderSnapshot(**record) for record in records]
        except (ValidationError, TypeError) as e:
            raise RecordStoreError(f"Malformed reminder in store response: {str(e)}") from e

    async def mark_reminder_notified(self, reminder_id: int) -> None:
        """Set the notified flag of a reminder"""
        await self._request("PUT", f"/reminders/{reminder_id}/notify")

    async def mark_medication_taken(self, medication_id: int, taken: bool = True) -> None:
        """Set the taken flag of a medication"""
        await self._request("PUT", f"/medications/{medication_id}/taken", json={"taken": taken})
