"""Apper hosted-data client: implements the RecordTransport interface.

Talks to the Apper REST API with httpx. Request bodies follow the hosted
SDK's parameter format (``fields``, ``orderBy``, ``pagingInfo``, ``where``,
``records``, ``RecordIds``); responses are parsed into transport envelopes.
"""

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from classroom_admin.application.interfaces import RecordTransport
from classroom_admin.domain.entities import (
    FieldError,
    FieldFilter,
    OrderBy,
    PageInfo,
    QueryEnvelope,
    RecordEnvelope,
    RecordResult,
    WriteEnvelope,
    WriteOperation,
)
from classroom_admin.domain.exceptions import TransportError

logger = logging.getLogger(__name__)


class ApperRecordTransport(RecordTransport):
    """Infrastructure adapter: connects to the Apper data API.

    An injected ``http_client`` is reused across calls (connection
    pooling); otherwise a short-lived client is opened per request.
    """

    def __init__(
        self,
        project_id: str,
        public_key: str,
        base_url: str = "https://api.apper.io/v1/data",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._project_id = project_id
        self._public_key = public_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "apper"

    def _get_headers(self) -> dict[str, str]:
        return {
            "X-Apper-Project-Id": self._project_id,
            "X-Apper-Public-Key": self._public_key,
            "Content-Type": "application/json",
        }

    # ── Request building ─────────────────────────────────────────────

    @staticmethod
    def _build_fetch_params(
        fields: Sequence[str],
        *,
        order_by: OrderBy | None = None,
        page: PageInfo | None = None,
        filters: Sequence[FieldFilter] | None = None,
    ) -> dict[str, Any]:
        """Build the fetch body in the hosted SDK's parameter format."""
        params: dict[str, Any] = {
            "fields": [{"field": {"Name": name}} for name in fields],
        }
        if order_by is not None:
            params["orderBy"] = [
                {"fieldName": order_by.field, "sorttype": order_by.direction.value}
            ]
        if page is not None:
            params["pagingInfo"] = {"limit": page.limit, "offset": page.offset}
        if filters:
            params["where"] = [
                {
                    "FieldName": f.field,
                    "Operator": f.operator,
                    "Values": list(f.values),
                }
                for f in filters
            ]
        return params

    # ── RecordTransport ──────────────────────────────────────────────

    async def query(
        self,
        table_name: str,
        fields: Sequence[str],
        *,
        order_by: OrderBy | None = None,
        page: PageInfo | None = None,
        filters: Sequence[FieldFilter] | None = None,
    ) -> QueryEnvelope:
        params = self._build_fetch_params(
            fields, order_by=order_by, page=page, filters=filters
        )
        data = await self._request("POST", f"/{table_name}/fetch", json=params)
        rows = data.get("data")
        return QueryEnvelope(
            success=bool(data.get("success")),
            data=rows if isinstance(rows, list) else None,
            message=data.get("message"),
        )

    async def query_one(
        self, table_name: str, record_id: int, fields: Sequence[str]
    ) -> RecordEnvelope:
        params = self._build_fetch_params(fields)
        data = await self._request(
            "POST", f"/{table_name}/{record_id}/fetch", json=params
        )
        row = data.get("data")
        return RecordEnvelope(
            success=bool(data.get("success")),
            data=row if isinstance(row, dict) else None,
            message=data.get("message"),
        )

    async def write(
        self,
        table_name: str,
        records: Sequence[dict[str, Any]],
        *,
        operation: WriteOperation,
    ) -> WriteEnvelope:
        method = "POST" if operation is WriteOperation.CREATE else "PUT"
        data = await self._request(
            method,
            f"/{table_name}/{operation.value}",
            json={"records": list(records)},
        )
        return self._parse_write_response(data)

    async def remove(self, table_name: str, ids: Sequence[int]) -> WriteEnvelope:
        data = await self._request(
            "DELETE", f"/{table_name}/delete", json={"RecordIds": list(ids)}
        )
        return self._parse_write_response(data)

    # ── Transport plumbing ───────────────────────────────────────────

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(self, method: str, path: str, *, json: dict) -> dict:
        url = f"{self._base_url}{path}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            logger.debug("%s %s", method, url)
            response = await client.request(
                method, url, headers=self._get_headers(), json=json
            )

            if response.status_code >= 400:
                self._raise_transport_error(response)

            try:
                data = response.json()
            except ValueError:
                raise TransportError(
                    provider=self.provider_name,
                    status_code=response.status_code,
                    message="Response body is not valid JSON",
                ) from None

            if not isinstance(data, dict):
                raise TransportError(
                    provider=self.provider_name,
                    status_code=response.status_code,
                    message="Unexpected response shape",
                )
            return data

        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _parse_write_response(data: dict) -> WriteEnvelope:
        """Parse a create/update/delete response into a WriteEnvelope."""
        raw_results = data.get("results")
        results = None
        if isinstance(raw_results, list):
            results = [
                RecordResult(
                    success=bool(item.get("success")),
                    data=item.get("data"),
                    message=item.get("message"),
                    errors=[
                        FieldError(
                            field_label=error.get("fieldLabel", ""),
                            message=error.get("message", ""),
                        )
                        for error in item.get("errors") or []
                    ],
                )
                for item in raw_results
            ]
        return WriteEnvelope(
            success=bool(data.get("success")),
            results=results,
            message=data.get("message"),
        )

    def _raise_transport_error(self, response: httpx.Response) -> None:
        """Raise TransportError from a non-2xx httpx Response."""
        try:
            message = response.json().get("message") or response.text
        except Exception:
            message = response.text

        raise TransportError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message,
        )
