"""Tests for wire format decoding and JSON output."""

import math
from dataclasses import dataclass
from decimal import Decimal

import pytest

from segment_explorer.engine import SummaryFacade
from segment_explorer.exceptions import InvalidRecordError, MissingClusterLabelError
from segment_explorer.models import FilterCriteria
from segment_explorer.serialization import (
    quantize_amount,
    record_from_dict,
    record_to_dict,
    serialize_value,
    summary_to_dict,
    to_dict_fast,
)
from segment_explorer.store import RecordStore


class TestRecordFromDict:
    """Tests for record_from_dict."""

    def test_decodes_all_fields(self, wire_record) -> None:
        record = record_from_dict(wire_record)

        assert record.age == 55
        assert record.purchase_amount == Decimal("53.5")
        assert record.review_rating == 3.1
        assert record.previous_purchases == 14
        assert record.category == "Clothing"
        assert record.location == "Kentucky"
        assert record.frequency_of_purchases == "Fortnightly"
        assert record.cluster == 2

    def test_integral_float_cluster(self, wire_record) -> None:
        assert record_from_dict(dict(wire_record, cluster=3.0)).cluster == 3

    def test_optional_fields_default(self, wire_record) -> None:
        minimal = {k: wire_record[k] for k in ("Age", "Purchase Amount (USD)", "Category", "Location", "cluster")}
        record = record_from_dict(minimal)

        assert record.gender == ""
        assert record.previous_purchases == 0

    @pytest.mark.parametrize("cluster", [None, True, "1", 1.5, math.nan, math.inf])
    def test_bad_cluster_label(self, wire_record, cluster) -> None:
        with pytest.raises(MissingClusterLabelError):
            record_from_dict(dict(wire_record, cluster=cluster))

    def test_missing_cluster_key(self, wire_record) -> None:
        del wire_record["cluster"]
        with pytest.raises(MissingClusterLabelError):
            record_from_dict(wire_record)

    @pytest.mark.parametrize(
        "key, value",
        [
            ("Age", -1),
            ("Age", 30.5),
            ("Age", None),
            ("Purchase Amount (USD)", -0.01),
            ("Purchase Amount (USD)", "cheap"),
            ("Category", ""),
            ("Location", None),
        ],
    )
    def test_invalid_fields(self, wire_record, key, value) -> None:
        with pytest.raises(InvalidRecordError):
            record_from_dict(dict(wire_record, **{key: value}))

    def test_not_an_object(self) -> None:
        with pytest.raises(InvalidRecordError):
            record_from_dict(["Age", 30])


class TestRecordToDict:
    """Tests for record_to_dict."""

    def test_uses_wire_keys(self, wire_record) -> None:
        assert record_to_dict(record_from_dict(wire_record)) == wire_record


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("99.99")) == "99.99"

    def test_nested(self) -> None:
        assert serialize_value({"a": [Decimal("1.50")]}) == {"a": ["1.50"]}

    def test_dataclass(self) -> None:
        @dataclass
        class _Sample:
            amount: Decimal

        assert serialize_value(_Sample(Decimal("2"))) == {"amount": "2"}
        assert to_dict_fast(_Sample(Decimal("2"))) == {"amount": "2"}

    def test_plain_values_pass_through(self) -> None:
        assert serialize_value("Texas") == "Texas"
        assert serialize_value(3) == 3
        assert serialize_value(None) is None


class TestSummaryToDict:
    """Tests for summary_to_dict."""

    def test_output_shape(self, scenario_store) -> None:
        summary = SummaryFacade(scenario_store).summarize(FilterCriteria(cluster_id=0), limit=2)
        result = summary_to_dict(summary)

        assert result["criteria"] == {"cluster_id": 0, "location": None}
        assert result["total_count"] == 5
        assert result["average_purchase_amount"] == "20.00"
        assert result["average_age"] == 30.0
        assert result["top_category"] == "Clothing"
        assert result["cluster_distribution"] == {"0": 3, "1": 2}
        assert len(result["table_rows"]) == 2
        assert result["table_rows"][0]["Purchase Amount (USD)"] == 10.0

    def test_large_amount(self, wire_record) -> None:
        store = RecordStore.from_payload([dict(wire_record, **{"Purchase Amount (USD)": 1e30})])

        result = summary_to_dict(SummaryFacade(store).summarize())

        assert result["average_purchase_amount"] == "1000000000000000000000000000000.00"


class TestQuantizeAmount:
    """Tests for quantize_amount."""

    def test_pads_to_two_places(self) -> None:
        assert str(quantize_amount(Decimal("20"))) == "20.00"

    def test_rounds_half_even(self) -> None:
        assert quantize_amount(Decimal("2.675")) == Decimal("2.68")
        assert quantize_amount(Decimal("2.665")) == Decimal("2.66")

    def test_exceeds_context_precision(self) -> None:
        amount = Decimal("123456789012345678901234567890.125")

        assert str(quantize_amount(amount)) == "123456789012345678901234567890.12"

    def test_custom_decimals(self) -> None:
        assert str(quantize_amount(Decimal("1.23456"), decimals=4)) == "1.2346"
