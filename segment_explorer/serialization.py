"""Wire format decoding/encoding for clustering service payloads."""

import math
from dataclasses import fields, is_dataclass
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any

from segment_explorer.exceptions import InvalidRecordError, MissingClusterLabelError
from segment_explorer.models.customer import CustomerRecord
from segment_explorer.models.summary import DashboardSummary

# Record attribute -> key used by the clustering service
WIRE_FIELDS: dict[str, str] = {
    "age": "Age",
    "purchase_amount": "Purchase Amount (USD)",
    "review_rating": "Review Rating",
    "previous_purchases": "Previous Purchases",
    "gender": "Gender",
    "category": "Category",
    "season": "Season",
    "subscription_status": "Subscription Status",
    "shipping_type": "Shipping Type",
    "discount_applied": "Discount Applied",
    "promo_code_used": "Promo Code Used",
    "payment_method": "Payment Method",
    "frequency_of_purchases": "Frequency of Purchases",
    "location": "Location",
    "cluster": "cluster",
}

CARRIED_CATEGORICALS = (
    "gender",
    "season",
    "subscription_status",
    "shipping_type",
    "discount_applied",
    "promo_code_used",
    "payment_method",
    "frequency_of_purchases",
)


def record_from_dict(payload: Any) -> CustomerRecord:
    """Decode and validate one upstream object.

    Parameters
    ----------
    payload : Any
        A JSON object keyed by the wire names in ``WIRE_FIELDS``.

    Returns
    -------
    CustomerRecord
        Validated record.

    Raises
    ------
    MissingClusterLabelError
        If the cluster label is absent, null or not a finite integer.
    InvalidRecordError
        If any other field violates the record contract.
    """
    if not isinstance(payload, dict):
        raise InvalidRecordError(f"expected a JSON object, got {type(payload).__name__}")

    cluster = _cluster_label(payload.get(WIRE_FIELDS["cluster"]))

    categoricals = {
        name: _optional_str(payload.get(WIRE_FIELDS[name])) for name in CARRIED_CATEGORICALS
    }

    return CustomerRecord(
        age=_non_negative_int(payload, "age"),
        purchase_amount=_non_negative_decimal(payload, "purchase_amount"),
        category=_required_str(payload, "category"),
        location=_required_str(payload, "location"),
        cluster=cluster,
        review_rating=_optional_float(payload, "review_rating"),
        previous_purchases=_optional_int(payload, "previous_purchases"),
        **categoricals,
    )


def record_to_dict(record: CustomerRecord) -> dict[str, Any]:
    """Encode a record back into the upstream wire shape."""
    result = {}
    for name, wire_key in WIRE_FIELDS.items():
        value = getattr(record, name)
        result[wire_key] = float(value) if isinstance(value, Decimal) else value
    return result


def to_dict_fast(obj: Any) -> dict:
    """Convert a flat dataclass without deep copy.

    Parameters
    ----------
    obj : Any
        A dataclass instance.

    Returns
    -------
    dict
        Serialized dictionary.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif is_dataclass(value) and not isinstance(value, type):
        return to_dict_fast(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def summary_to_dict(summary: DashboardSummary, decimals: int = 2) -> dict[str, Any]:
    """Convert a dashboard summary into JSON-ready output.

    Averages are rounded to ``decimals`` places; distribution keys become
    strings as JSON object keys must be. Table rows use the wire shape.
    """
    return {
        "criteria": serialize_value(summary.criteria),
        "total_count": summary.total_count,
        "average_age": round(summary.average_age, decimals),
        "average_purchase_amount": serialize_value(
            quantize_amount(summary.average_purchase_amount, decimals)
        ),
        "top_category": summary.top_category,
        "category_distribution": dict(summary.category_distribution),
        "cluster_distribution": {str(k): v for k, v in summary.cluster_distribution.items()},
        "location_distribution": dict(summary.location_distribution),
        "table_rows": [record_to_dict(row) for row in summary.table_rows],
    }


def quantize_amount(amount: Decimal, decimals: int = 2) -> Decimal:
    """Round an amount to ``decimals`` places, widening precision for large values."""
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + decimals + 1)
        return amount.quantize(exponent)


def _cluster_label(value: Any) -> int:
    """Validate the cluster label."""
    if value is None:
        raise MissingClusterLabelError("record has no cluster label")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MissingClusterLabelError(f"cluster label must be an integer, got {value!r}")
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise MissingClusterLabelError(f"cluster label must be a finite integer, got {value!r}")
        return int(value)
    return value


def _number(payload: dict, name: str) -> int | float:
    value = payload.get(WIRE_FIELDS[name])
    if value is None:
        raise InvalidRecordError(f"missing required field {WIRE_FIELDS[name]!r}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRecordError(f"{WIRE_FIELDS[name]!r} must be numeric, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidRecordError(f"{WIRE_FIELDS[name]!r} must be finite, got {value!r}")
    return value


def _non_negative_int(payload: dict, name: str) -> int:
    value = _number(payload, name)
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidRecordError(f"{WIRE_FIELDS[name]!r} must be an integer, got {value!r}")
        value = int(value)
    if value < 0:
        raise InvalidRecordError(f"{WIRE_FIELDS[name]!r} must be non-negative, got {value!r}")
    return value


def _non_negative_decimal(payload: dict, name: str) -> Decimal:
    value = _number(payload, name)
    try:
        amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidRecordError(f"{WIRE_FIELDS[name]!r} is not a valid amount") from exc
    if amount < 0:
        raise InvalidRecordError(f"{WIRE_FIELDS[name]!r} must be non-negative, got {value!r}")
    return amount


def _required_str(payload: dict, name: str) -> str:
    value = payload.get(WIRE_FIELDS[name])
    if not isinstance(value, str) or not value:
        raise InvalidRecordError(f"{WIRE_FIELDS[name]!r} must be a non-empty string, got {value!r}")
    return value


def _optional_float(payload: dict, name: str) -> float:
    if payload.get(WIRE_FIELDS[name]) is None:
        return 0.0
    return float(_number(payload, name))


def _optional_int(payload: dict, name: str) -> int:
    if payload.get(WIRE_FIELDS[name]) is None:
        return 0
    return _non_negative_int(payload, name)


def _optional_str(value: Any) -> str:
    return "" if value is None else str(value)
