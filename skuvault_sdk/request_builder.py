"""Request construction for the SkuVault API.

Every SkuVault call is a POST with a JSON body that carries the tenant/user
token pair next to the operation fields. This module turns an endpoint
descriptor plus caller fields into an ``ApiRequest`` and owns the date
normalisation shared by the date-bearing operations.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional

from dateutil import parser as date_parser


logger = logging.getLogger("skuvault_sdk.request_builder")

PRODUCTION_BASE_URL = "https://app.skuvault.com/api/"
STAGING_BASE_URL = "https://staging.skuvault.com/api/"

DEFAULT_TIMEOUT = 20.0
USER_AGENT = "SkuVault Python Library (skuvault-sdk)"
DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": USER_AGENT,
    "Content-Type": "application/json",
    "Accept": "application/json",
}

AUTH_FIELDS = ("TenantToken", "UserToken")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Credentials:
    """Tenant/user token pair sent with every request."""

    tenant_token: Optional[str] = None
    user_token: Optional[str] = None


@dataclass(frozen=True)
class Endpoint:
    """Static description of one vendor operation."""

    path: str
    method: str = "POST"
    bulk_key: Optional[str] = None
    max_records: Optional[int] = None


@dataclass
class ApiRequest:
    """Fully-formed request handed to the transport."""

    method: str
    url: str
    json: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT


class _CaseInsensitiveEnum(str, Enum):
    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower() or member.name.lower() == value.lower():
                    return member
        return None


class ItemIdentifier(_CaseInsensitiveEnum):
    """How an inventory item is identified; the value is the JSON key."""

    SKU = "Sku"
    CODE = "Code"


class SaleIdentifier(_CaseInsensitiveEnum):
    """How a sale is identified when updating its status."""

    SALE_ID = "SaleId"
    ORDER_ID = "OrderId"


class SaleStatus(_CaseInsensitiveEnum):
    PENDING = "Pending"
    READY_TO_SHIP = "ReadyToShip"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    INVALID = "Invalid"
    SHIPPED_UNPAID = "ShippedUnpaid"


class AltCodeAction(_CaseInsensitiveEnum):
    """Add/Delete only touch the listed alternates; Update replaces them all."""

    ADD = "Add"
    DELETE = "Delete"
    UPDATE = "Update"


def enum_value(value: Any) -> Any:
    """Return the plain value of an enum member, or ``value`` unchanged."""
    if isinstance(value, Enum):
        return value.value
    return value


def build_payload(credentials: Credentials, payload: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Merge the auth tokens with operation fields into a new JSON body.

    ``TenantToken`` and ``UserToken`` always come first and are never
    overridden by same-named caller keys.
    """
    body: Dict[str, Any] = {
        "TenantToken": credentials.tenant_token,
        "UserToken": credentials.user_token,
    }
    for key, value in (payload or {}).items():
        if key in AUTH_FIELDS:
            logger.debug("Ignoring caller-supplied auth field %s", key)
            continue
        body[key] = value
    return body


def build_request(
    base_url: str,
    endpoint: Endpoint,
    payload: Optional[Mapping[str, Any]],
    credentials: Credentials,
    *,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> ApiRequest:
    """Assemble method, absolute URL, JSON body, headers and timeout."""
    if not base_url.endswith("/"):
        base_url = base_url + "/"
    merged_headers = dict(DEFAULT_HEADERS)
    if headers:
        merged_headers.update({str(k): str(v) for k, v in headers.items()})
    return ApiRequest(
        method=endpoint.method,
        url=base_url + endpoint.path.lstrip("/"),
        json=build_payload(credentials, payload),
        headers=merged_headers,
        timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
    )


def wrap_bulk(endpoint: Endpoint, records: Iterable[Any]) -> Dict[str, Any]:
    """Wrap many records under the endpoint's list key, e.g. ``{"Items": [...]}``."""
    if not endpoint.bulk_key:
        raise ValueError(f"Endpoint {endpoint.path} does not accept bulk records")
    items = list(records)
    if endpoint.max_records is not None and len(items) > endpoint.max_records:
        logger.warning(
            "%s received %d records, vendor maximum is %d",
            endpoint.path, len(items), endpoint.max_records,
        )
    return {endpoint.bulk_key: items}


def _is_numeric(value: str) -> bool:
    try:
        number = float(value)
    except ValueError:
        return False
    return math.isfinite(number)


def utc_date(value: Any = None, *, strict: bool = False) -> datetime:
    """Convert a timestamp, date string or date object to an aware UTC datetime.

    - int/float and numeric strings are Unix epoch seconds
    - other strings go through the permissive ``dateutil`` parser
    - ``date``/``datetime`` objects are used as-is (naive means UTC)
    - anything else, including ``None``, means "now"

    Input with no representable UTC instant, such as an unparseable string
    or an out-of-range timestamp, falls back to the Unix epoch
    unless ``strict`` is set, in which case ``ValueError`` is raised.
    """
    if isinstance(value, bool):
        return datetime.now(timezone.utc)

    try:
        if isinstance(value, (int, float)) or (isinstance(value, str) and _is_numeric(value)):
            return datetime.fromtimestamp(int(float(value)), tz=timezone.utc)
        if isinstance(value, str):
            return _as_utc(date_parser.parse(value))
        if isinstance(value, datetime):
            return _as_utc(value)
    except (ValueError, OverflowError, OSError) as e:
        if strict:
            raise ValueError(f"Unparseable date: {value!r}") from e
        logger.warning("Unparseable date %r, falling back to epoch", value)
        return _EPOCH

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def api_time_format(value: datetime) -> str:
    """Render a UTC datetime in the vendor's ``YYYY-MM-DDTHH:MM:SSZ`` form."""
    # strftime("%Y") does not zero-pad years below 1000 on glibc
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}Z"
    )


def normalize_date(value: Any = None, *, strict: bool = False) -> str:
    """Normalise any supported date input to the vendor's UTC string form."""
    return api_time_format(utc_date(value, strict=strict))
