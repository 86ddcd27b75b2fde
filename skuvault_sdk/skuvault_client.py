from __future__ import annotations

import os
import logging
import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import httpx
from dotenv import load_dotenv

from . import endpoints
from .csv_pager import CsvRecord, get_page
from .request_builder import (
    DEFAULT_TIMEOUT,
    PRODUCTION_BASE_URL,
    STAGING_BASE_URL,
    AltCodeAction,
    ApiRequest,
    Credentials,
    Endpoint,
    ItemIdentifier,
    SaleIdentifier,
    SaleStatus,
    build_request,
    enum_value,
    normalize_date,
    utc_date,
    api_time_format,
    wrap_bulk,
)
from .utils.logging import truncate


logger = logging.getLogger("skuvault_sdk.http")

_SECRET_FIELDS = {"tenanttoken", "usertoken", "password"}
_TRUTHY = {"1", "true", "yes", "on"}


def _redact_payload(payload: Mapping[str, Any]) -> Dict[str, Any]:
    redacted = {}
    for k, v in payload.items():
        if str(k).lower() in _SECRET_FIELDS:
            redacted[k] = "[REDACTED]"
        else:
            redacted[k] = v
    return redacted


def _with_params(params: Optional[Mapping[str, Any]], **fields: Any) -> Dict[str, Any]:
    """Copy caller params and set operation fields on top."""
    body = dict(params or {})
    body.update(fields)
    return body


class SkuVaultConfigError(ValueError):
    """Raised when the client cannot be configured from the environment."""


class SkuVaultRequestError(Exception):
    """A SkuVault call failed at the transport or returned a non-2xx status.

    ``request`` is the ``httpx.Request`` that was sent, ``payload`` its JSON
    body and ``response`` the ``httpx.Response`` when one was received.
    """

    def __init__(
        self,
        message: str,
        *,
        request: Optional[httpx.Request] = None,
        response: Optional[httpx.Response] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.request = request
        self.response = response
        self.payload = payload

    @property
    def status_code(self) -> Optional[int]:
        if self.response is None:
            return None
        return self.response.status_code


@dataclass
class SkuVaultClient:
    """Async client for the SkuVault inventory API.

    Every operation sends a single POST and returns the raw ``httpx.Response``;
    interpreting the body is left to the caller. Operations accept ``headers``
    and ``timeout`` keyword overrides. Without an injected ``http_client`` a
    short-lived ``httpx.AsyncClient`` is used per request.
    """

    credentials: Credentials = field(default_factory=Credentials)
    use_staging: bool = False
    timeout: float = DEFAULT_TIMEOUT
    http_client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_env(cls) -> "SkuVaultClient":
        """Create a client using environment variables loaded via dotenv.

        Required env vars:
        - SKUVAULT_TENANT_TOKEN
        - SKUVAULT_USER_TOKEN
        Optional:
        - SKUVAULT_USE_STAGING (defaults to production)
        - SKUVAULT_TIMEOUT (seconds, defaults to 20)
        """
        load_dotenv(override=False)
        tenant_token = os.getenv("SKUVAULT_TENANT_TOKEN")
        user_token = os.getenv("SKUVAULT_USER_TOKEN")

        if not tenant_token or not user_token:
            raise SkuVaultConfigError(
                "Missing SKUVAULT_TENANT_TOKEN or SKUVAULT_USER_TOKEN in environment."
            )

        use_staging = os.getenv("SKUVAULT_USE_STAGING", "").strip().lower() in _TRUTHY
        raw_timeout = os.getenv("SKUVAULT_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise SkuVaultConfigError(f"Invalid SKUVAULT_TIMEOUT: {raw_timeout!r}") from e

        return cls(
            credentials=Credentials(tenant_token=tenant_token, user_token=user_token),
            use_staging=use_staging,
            timeout=timeout,
        )

    @property
    def base_url(self) -> str:
        return STAGING_BASE_URL if self.use_staging else PRODUCTION_BASE_URL

    def set_tokens(self, tenant_token: Optional[str], user_token: Optional[str]) -> None:
        """Replace the stored token pair, e.g. with the result of ``get_tokens``."""
        self.credentials = Credentials(tenant_token=tenant_token, user_token=user_token)

    async def _request(
        self,
        endpoint: Endpoint,
        payload: Optional[Mapping[str, Any]] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """Build and send one request; raise SkuVaultRequestError on failure."""
        api_request = build_request(
            self.base_url,
            endpoint,
            payload,
            self.credentials,
            headers=headers,
            timeout=self.timeout if timeout is None else timeout,
        )
        if self.http_client is not None:
            return await self._send(self.http_client, endpoint, api_request)
        async with httpx.AsyncClient() as client:
            return await self._send(client, endpoint, api_request)

    async def _send(
        self, client: httpx.AsyncClient, endpoint: Endpoint, api_request: ApiRequest
    ) -> httpx.Response:
        request = client.build_request(
            api_request.method,
            api_request.url,
            json=api_request.json,
            headers=api_request.headers,
            timeout=api_request.timeout,
        )
        logger.debug(
            "HTTP %s %s body=%s",
            api_request.method,
            endpoint.path,
            truncate(str(_redact_payload(api_request.json)), 1000),
        )

        start = time.perf_counter()
        try:
            response = await client.send(request)
        except httpx.RequestError as e:
            logger.warning(
                "HTTP %s %s failed: %s", api_request.method, endpoint.path, type(e).__name__
            )
            raise SkuVaultRequestError(
                f"{api_request.method} {endpoint.path} failed: {e}",
                request=request,
                payload=api_request.json,
            ) from e
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        logger.debug(
            "HTTP %s %s status=%s elapsed_ms=%.2f",
            api_request.method,
            endpoint.path,
            response.status_code,
            elapsed_ms,
        )

        if not response.is_success:
            logger.warning(
                "HTTP %s %s returned %s: %s",
                api_request.method,
                endpoint.path,
                response.status_code,
                truncate(response.text or "", 500),
            )
            raise SkuVaultRequestError(
                f"{api_request.method} {endpoint.path} error: "
                f"{response.status_code} {truncate(response.text or '', 200)}",
                request=request,
                response=response,
                payload=api_request.json,
            )
        return response

    # ------------------------------- Auth -------------------------------

    async def get_tokens(self, email: str, password: str, **options: Any) -> httpx.Response:
        """Exchange login credentials for API tokens.

        The returned tokens are not applied; pass them to ``set_tokens``.
        """
        return await self._request(
            endpoints.GET_TOKENS, {"Email": email, "Password": password}, **options
        )

    # ---------------------------- Inventory -----------------------------

    async def add_item(self, item: Dict[str, Any], **options: Any) -> httpx.Response:
        """Add quantity to a warehouse location."""
        return await self._request(endpoints.ADD_ITEM, item, **options)

    async def add_item_bulk(self, items: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        """Add quantities to warehouse locations in bulk (100 max)."""
        return await self._request(
            endpoints.ADD_ITEM_BULK, wrap_bulk(endpoints.ADD_ITEM_BULK, items), **options
        )

    async def get_available_quantities(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(endpoints.GET_AVAILABLE_QUANTITIES, _with_params(params), **options)

    async def get_external_warehouse_quantities(
        self, warehouse_id: str, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(
            endpoints.GET_EXTERNAL_WAREHOUSE_QUANTITIES,
            _with_params(params, WarehouseId=warehouse_id),
            **options,
        )

    async def get_external_warehouses(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(endpoints.GET_EXTERNAL_WAREHOUSES, _with_params(params), **options)

    async def get_inventory_by_location(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        """Get product inventory by location."""
        return await self._request(endpoints.GET_INVENTORY_BY_LOCATION, _with_params(params), **options)

    async def get_item_quantities(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(endpoints.GET_ITEM_QUANTITIES, _with_params(params), **options)

    async def get_kit_quantities(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(endpoints.GET_KIT_QUANTITIES, _with_params(params), **options)

    async def get_locations(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        """Get all locations in enabled warehouses."""
        return await self._request(endpoints.GET_LOCATIONS, _with_params(params), **options)

    async def get_transactions(
        self,
        from_date: Any = None,
        to_date: Any = None,
        params: Optional[Dict[str, Any]] = None,
        **options: Any,
    ) -> httpx.Response:
        """Get transaction history by date range (max 7 days).

        A missing bound is derived from the other one; with neither given the
        range is the 7 days up to now.
        """
        if from_date is None:
            end = utc_date(to_date)
            start = end - timedelta(days=7)
        elif to_date is None:
            start = utc_date(from_date)
            end = start + timedelta(days=7)
        else:
            start = utc_date(from_date)
            end = utc_date(to_date)

        body = _with_params(
            params,
            FromDate=api_time_format(start),
            ToDate=api_time_format(end),
        )
        return await self._request(endpoints.GET_TRANSACTIONS, body, **options)

    async def get_warehouse_item_quantities(
        self, warehouse_id: int, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        """Get skus and quantities from a specified warehouse."""
        return await self._request(
            endpoints.GET_WAREHOUSE_ITEM_QUANTITIES,
            _with_params(params, WarehouseId=warehouse_id),
            **options,
        )

    async def get_warehouse_item_quantity(
        self, sku: str, warehouse_id: int, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(
            endpoints.GET_WAREHOUSE_ITEM_QUANTITY,
            _with_params(params, Sku=sku, WarehouseId=warehouse_id),
            **options,
        )

    async def get_warehouses(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(endpoints.GET_WAREHOUSES, _with_params(params), **options)

    async def pick_item(
        self,
        identifier: Union[ItemIdentifier, str],
        sku_code: str,
        warehouse_id: int,
        quantity: int,
        location: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        **options: Any,
    ) -> httpx.Response:
        """Perform a pick transaction.

        Without a location the pick is sent as an express pick.
        """
        key = ItemIdentifier(identifier).value
        body = _with_params(params, **{key: sku_code})
        body["WarehouseId"] = warehouse_id
        body["Quantity"] = quantity
        if location is not None:
            body["LocationCode"] = location
        else:
            body["IsExpressPick"] = True
        return await self._request(endpoints.PICK_ITEM, body, **options)

    async def remove_item(
        self,
        identifier: Union[ItemIdentifier, str],
        sku_code: str,
        warehouse_id: int,
        quantity: int,
        location: str,
        reason: str,
        params: Optional[Dict[str, Any]] = None,
        **options: Any,
    ) -> httpx.Response:
        """Remove item quantity from a warehouse location.

        ``reason`` must already exist in SkuVault.
        """
        key = ItemIdentifier(identifier).value
        body = _with_params(params, **{key: sku_code})
        body.update(
            WarehouseId=warehouse_id,
            Quantity=quantity,
            LocationCode=location,
            Reason=reason,
        )
        return await self._request(endpoints.REMOVE_ITEM, body, **options)

    async def remove_item_bulk(self, items: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        return await self._request(
            endpoints.REMOVE_ITEM_BULK, wrap_bulk(endpoints.REMOVE_ITEM_BULK, items), **options
        )

    async def set_item_quantity(
        self,
        identifier: Union[ItemIdentifier, str],
        sku_code: str,
        warehouse_id: int,
        quantity: int,
        location: str,
        **options: Any,
    ) -> httpx.Response:
        """Set an item quantity in a warehouse location."""
        key = ItemIdentifier(identifier).value
        body = {
            key: sku_code,
            "WarehouseId": warehouse_id,
            "Quantity": quantity,
            "LocationCode": location,
        }
        return await self._request(endpoints.SET_ITEM_QUANTITY, body, **options)

    async def set_item_quantities(self, items: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        return await self._request(
            endpoints.SET_ITEM_QUANTITIES, wrap_bulk(endpoints.SET_ITEM_QUANTITIES, items), **options
        )

    async def update_external_warehouse_quantities(
        self, warehouse_id: str, quantities: Iterable[Dict[str, Any]], **options: Any
    ) -> httpx.Response:
        """Update external warehouse quantities.

        Any SKU omitted from the request is removed from that warehouse.
        """
        body = {"WarehouseId": warehouse_id}
        body.update(wrap_bulk(endpoints.UPDATE_EXTERNAL_WAREHOUSE_QUANTITIES, quantities))
        return await self._request(endpoints.UPDATE_EXTERNAL_WAREHOUSE_QUANTITIES, body, **options)

    def get_lot_quantities_by_location(
        self, path: Union[str, os.PathLike], query: Mapping[str, Any]
    ) -> List[CsvRecord]:
        """Read one page of lot/location quantities from a local CSV export.

        ``query`` carries ``PageSize`` and ``PageNumber``. No request is sent.
        """
        return get_page(path, int(query["PageSize"]), int(query["PageNumber"]))

    # ----------------------------- Products -----------------------------

    async def create_brands(self, brands: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        return await self._request(
            endpoints.CREATE_BRANDS, wrap_bulk(endpoints.CREATE_BRANDS, brands), **options
        )

    async def create_kit(self, kit: Dict[str, Any], **options: Any) -> httpx.Response:
        return await self._request(endpoints.CREATE_KIT, kit, **options)

    async def create_product(self, product: Dict[str, Any], **options: Any) -> httpx.Response:
        return await self._request(endpoints.CREATE_PRODUCT, product, **options)

    async def create_products(self, products: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        """Create products in bulk (100 max)."""
        return await self._request(
            endpoints.CREATE_PRODUCTS, wrap_bulk(endpoints.CREATE_PRODUCTS, products), **options
        )

    async def create_suppliers(self, suppliers: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        return await self._request(
            endpoints.CREATE_SUPPLIERS, wrap_bulk(endpoints.CREATE_SUPPLIERS, suppliers), **options
        )

    async def get_brands(self, params: Optional[Dict[str, Any]] = None, **options: Any) -> httpx.Response:
        return await self._request(endpoints.GET_BRANDS, _with_params(params), **options)

    async def get_classifications(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(endpoints.GET_CLASSIFICATIONS, _with_params(params), **options)

    async def get_handling_time(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(endpoints.GET_HANDLING_TIME, _with_params(params), **options)

    async def get_kits(self, params: Optional[Dict[str, Any]] = None, **options: Any) -> httpx.Response:
        return await self._request(endpoints.GET_KITS, _with_params(params), **options)

    async def get_products(self, params: Optional[Dict[str, Any]] = None, **options: Any) -> httpx.Response:
        return await self._request(endpoints.GET_PRODUCTS, _with_params(params), **options)

    async def get_suppliers(self, params: Optional[Dict[str, Any]] = None, **options: Any) -> httpx.Response:
        return await self._request(endpoints.GET_SUPPLIERS, _with_params(params), **options)

    async def update_alt_skus_codes(
        self,
        action: Union[AltCodeAction, str],
        items: Iterable[Dict[str, Any]],
        **options: Any,
    ) -> httpx.Response:
        """Update alternate SKUs and codes.

        ``Add`` and ``Delete`` only touch the alternates listed; ``Update``
        overwrites a product's alternates with the ones provided.
        """
        body: Dict[str, Any] = {"Action": enum_value(AltCodeAction(action))}
        body.update(wrap_bulk(endpoints.UPDATE_ALT_SKUS_CODES, items))
        return await self._request(endpoints.UPDATE_ALT_SKUS_CODES, body, **options)

    async def update_handling_time(self, items: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        return await self._request(
            endpoints.UPDATE_HANDLING_TIME, wrap_bulk(endpoints.UPDATE_HANDLING_TIME, items), **options
        )

    async def update_product(
        self, sku: str, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(endpoints.UPDATE_PRODUCT, _with_params(params, Sku=sku), **options)

    async def update_products(self, items: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        """Update multiple products (100 max)."""
        return await self._request(
            endpoints.UPDATE_PRODUCTS, wrap_bulk(endpoints.UPDATE_PRODUCTS, items), **options
        )

    # -------------------------- Purchase orders -------------------------

    async def create_po(self, purchase_order: Dict[str, Any], **options: Any) -> httpx.Response:
        return await self._request(endpoints.CREATE_PO, purchase_order, **options)

    async def get_incoming_items(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        """Get incoming items for incomplete purchase orders."""
        return await self._request(endpoints.GET_INCOMING_ITEMS, _with_params(params), **options)

    async def get_pos(self, params: Optional[Dict[str, Any]] = None, **options: Any) -> httpx.Response:
        return await self._request(endpoints.GET_POS, _with_params(params), **options)

    async def get_receives_history(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(endpoints.GET_RECEIVES_HISTORY, _with_params(params), **options)

    async def receive_po_items(
        self,
        po_number: str,
        supplier_name: str,
        line_items: List[Dict[str, Any]],
        receipt_date: Any = None,
        params: Optional[Dict[str, Any]] = None,
        **options: Any,
    ) -> httpx.Response:
        """Receive purchase order items; ``receipt_date`` defaults to now."""
        body = _with_params(
            params,
            PoNumber=po_number,
            SupplierName=supplier_name,
            ReceiptDate=normalize_date(receipt_date),
            LineItems=line_items,
        )
        return await self._request(endpoints.RECEIVE_PO_ITEMS, body, **options)

    async def update_pos(self, purchase_orders: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        return await self._request(
            endpoints.UPDATE_POS, wrap_bulk(endpoints.UPDATE_POS, purchase_orders), **options
        )

    # ------------------------------- Sales ------------------------------

    async def add_shipments(self, shipments: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        return await self._request(
            endpoints.ADD_SHIPMENTS, wrap_bulk(endpoints.ADD_SHIPMENTS, shipments), **options
        )

    async def create_holds(self, holds: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        return await self._request(
            endpoints.CREATE_HOLDS, wrap_bulk(endpoints.CREATE_HOLDS, holds), **options
        )

    async def get_online_sale_status(
        self, order_ids: Iterable[Any], params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        """Get sales and their statuses for up to 10,000 order ids."""
        body = _with_params(params)
        body.update(wrap_bulk(endpoints.GET_ONLINE_SALE_STATUS, (str(o) for o in order_ids)))
        return await self._request(endpoints.GET_ONLINE_SALE_STATUS, body, **options)

    async def get_sales(self, params: Optional[Dict[str, Any]] = None, **options: Any) -> httpx.Response:
        return await self._request(endpoints.GET_SALES, _with_params(params), **options)

    async def get_sales_by_date(
        self,
        from_date: Any,
        to_date: Any,
        params: Optional[Dict[str, Any]] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        **options: Any,
    ) -> httpx.Response:
        """Get sales within a date range (not more than 7 days).

        Sent with ``X-API-Version: 2`` unless the caller supplies headers.
        """
        if headers is None:
            headers = {"X-API-Version": "2"}
        body = _with_params(
            params,
            FromDate=normalize_date(from_date),
            ToDate=normalize_date(to_date),
        )
        return await self._request(endpoints.GET_SALES_BY_DATE, body, headers=headers, **options)

    async def get_shipments(self, params: Optional[Dict[str, Any]] = None, **options: Any) -> httpx.Response:
        return await self._request(endpoints.GET_SHIPMENTS, _with_params(params), **options)

    async def get_sold_items(
        self,
        start_date: Any,
        end_date: Any,
        params: Optional[Dict[str, Any]] = None,
        **options: Any,
    ) -> httpx.Response:
        """Get items sold in a date range (max 14 days)."""
        body = _with_params(
            params,
            StartDateUtc=normalize_date(start_date),
            EndDateUtc=normalize_date(end_date),
        )
        return await self._request(endpoints.GET_SOLD_ITEMS, body, **options)

    async def release_held_quantities(
        self, skus: Dict[str, int], params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        """Release held quantities; ``skus`` maps sku to quantity to release."""
        return await self._request(
            endpoints.RELEASE_HELD_QUANTITIES, _with_params(params, SkusToRelease=skus), **options
        )

    async def set_shipment_file(self, shipments: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        """Attach base64 PDF files to shipments."""
        return await self._request(
            endpoints.SET_SHIPMENT_FILE, wrap_bulk(endpoints.SET_SHIPMENT_FILE, shipments), **options
        )

    async def sync_online_sale(
        self,
        order_id: str,
        item_skus: List[Dict[str, Any]],
        params: Optional[Dict[str, Any]] = None,
        **options: Any,
    ) -> httpx.Response:
        """Create or update an online sale.

        ``ShippingStatus`` is needed to create a sale but not to update one.
        """
        body = self._sale_body(order_id, item_skus, params)
        return await self._request(endpoints.SYNC_ONLINE_SALE, body, **options)

    async def sync_online_sales(self, sales: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        """Sync multiple sales at once (100 max)."""
        return await self._request(
            endpoints.SYNC_ONLINE_SALES, wrap_bulk(endpoints.SYNC_ONLINE_SALES, sales), **options
        )

    async def sync_shipped_sale_and_remove_items(
        self,
        order_id: str,
        item_skus: List[Dict[str, Any]],
        params: Optional[Dict[str, Any]] = None,
        **options: Any,
    ) -> httpx.Response:
        """Sync a shipped sale and remove its quantities.

        Without a ``WarehouseId`` quantity is only removed when the item lives
        in a single location across all warehouses; with one, a single location
        within that warehouse.
        """
        body = self._sale_body(order_id, item_skus, params)
        return await self._request(endpoints.SYNC_SHIPPED_SALE_AND_REMOVE_ITEMS, body, **options)

    @staticmethod
    def _sale_body(
        order_id: str, item_skus: List[Dict[str, Any]], params: Optional[Dict[str, Any]]
    ) -> Dict[str, Any]:
        body = _with_params(params, OrderId=order_id, ItemSkus=item_skus)
        if body.get("OrderDateUtc") is not None:
            body["OrderDateUtc"] = normalize_date(body["OrderDateUtc"])
        return body

    async def update_online_sale_status(
        self,
        sale_id: str,
        status: Union[SaleStatus, str],
        identifier: Union[SaleIdentifier, str] = SaleIdentifier.SALE_ID,
        **options: Any,
    ) -> httpx.Response:
        key = SaleIdentifier(identifier).value
        body = {key: sale_id, "Status": enum_value(status)}
        return await self._request(endpoints.UPDATE_ONLINE_SALE_STATUS, body, **options)

    async def update_shipments(self, shipments: Iterable[Dict[str, Any]], **options: Any) -> httpx.Response:
        return await self._request(
            endpoints.UPDATE_SHIPMENTS, wrap_bulk(endpoints.UPDATE_SHIPMENTS, shipments), **options
        )

    # ---------------------------- Integrations --------------------------

    async def get_integrations(
        self, params: Optional[Dict[str, Any]] = None, **options: Any
    ) -> httpx.Response:
        return await self._request(endpoints.GET_INTEGRATIONS, _with_params(params), **options)
