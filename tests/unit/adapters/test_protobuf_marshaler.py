"""Unit tests for the protobuf marshaler adapter, schema and family conversion."""

import pytest
from google.protobuf import text_format
from prometheus_client import Metric
from prometheus_client.core import (
    CounterMetricFamily,
    GaugeMetricFamily,
    HistogramMetricFamily,
    InfoMetricFamily,
    SummaryMetricFamily,
    UnknownMetricFamily,
)

from metricfmt.adapters.protobuf_marshaler import (
    FakeProtobufMarshaler,
    ProtobufMetricFamilyMarshaler,
    parse_delimited,
    schema,
)
from metricfmt.adapters.protobuf_marshaler.convert import to_protobuf
from metricfmt.adapters.protobuf_marshaler.protobuf import decode_varint, encode_varint
from metricfmt.core.exceptions import MetricFamilyConversionError


def _requests() -> CounterMetricFamily:
    family = CounterMetricFamily("requests", "Requests served", labels=["code"])
    family.add_metric(["200"], 3)
    family.add_metric(["500"], 1)
    return family


class TestFakeProtobufMarshaler:
    """Tests for the FakeProtobufMarshaler test helper."""

    def test_records_calls_per_encoding(self):
        fake = FakeProtobufMarshaler()
        family = _requests()

        assert fake.marshal_delimited(family) == b"<delimited requests>"
        assert fake.marshal_text(family) == "<text requests>"
        assert fake.marshal_compact_text(family) == "<compact-text requests>"
        assert fake.delimited == fake.text == fake.compact_text == [family]

    def test_clear_resets_all_state(self):
        fake = FakeProtobufMarshaler()
        fake.marshal_delimited(_requests())
        fake.marshal_text(_requests())

        fake.clear()

        assert fake.delimited == []
        assert fake.text == []
        assert fake.compact_text == []


class TestVarint:
    def test_single_byte(self):
        assert encode_varint(0) == b"\x00"
        assert encode_varint(127) == b"\x7f"

    def test_multi_byte(self):
        assert encode_varint(300) == b"\xac\x02"
        assert decode_varint(b"\xac\x02rest", 0) == (300, 2)

    def test_truncated_varint_raises(self):
        with pytest.raises(ValueError):
            decode_varint(b"\x80", 0)


class TestConversion:
    """Tests for prometheus-client Metric -> MetricFamily message mapping."""

    def test_counter(self):
        message = to_protobuf(_requests())

        assert message.name == "requests_total"
        assert message.help == "Requests served"
        assert message.type == schema.COUNTER
        assert [(m.label[0].value, m.counter.value) for m in message.metric] == [
            ("200", 3.0),
            ("500", 1.0),
        ]

    def test_counter_created_sample_is_dropped(self):
        family = CounterMetricFamily("jobs", "Jobs", labels=["queue"])
        family.add_metric(["default"], 7, created=1700000000.0)

        message = to_protobuf(family)

        assert len(message.metric) == 1
        assert message.metric[0].counter.value == 7.0

    def test_gauge_with_timestamp(self):
        family = GaugeMetricFamily("temperature", "Room temperature", labels=["room"])
        family.add_metric(["kitchen"], 21.5, timestamp=1700000000.25)

        (metric,) = to_protobuf(family).metric

        assert metric.gauge.value == 21.5
        assert metric.timestamp_ms == 1700000000250

    def test_labels_are_sorted_by_name(self):
        family = GaugeMetricFamily("temperature", "Room temperature", labels=["room", "floor"])
        family.add_metric(["kitchen", "1"], 21.5)

        (metric,) = to_protobuf(family).metric

        assert [(p.name, p.value) for p in metric.label] == [("floor", "1"), ("room", "kitchen")]

    def test_info_is_a_gauge_with_suffix(self):
        family = InfoMetricFamily("build", "Build metadata", value={"version": "1.2.3"})

        message = to_protobuf(family)

        assert message.name == "build_info"
        assert message.type == schema.GAUGE
        assert message.metric[0].gauge.value == 1.0
        assert message.metric[0].label[0].value == "1.2.3"

    def test_unknown_is_untyped(self):
        message = to_protobuf(UnknownMetricFamily("mystery", "Unknown", value=4))

        assert message.type == schema.UNTYPED
        assert message.metric[0].untyped.value == 4.0

    def test_summary_with_quantiles(self):
        family = Metric("rpc_seconds", "RPC latency", "summary")
        family.add_sample("rpc_seconds", {"quantile": "0.5"}, 0.2)
        family.add_sample("rpc_seconds", {"quantile": "0.99"}, 0.9)
        family.add_sample("rpc_seconds_count", {}, 10)
        family.add_sample("rpc_seconds_sum", {}, 3.5)

        (metric,) = to_protobuf(family).metric

        assert metric.summary.sample_count == 10
        assert metric.summary.sample_sum == 3.5
        assert [(q.quantile, q.value) for q in metric.summary.quantile] == [(0.5, 0.2), (0.99, 0.9)]

    def test_summary_without_quantiles(self):
        family = SummaryMetricFamily("rpc_seconds", "RPC latency", count_value=4, sum_value=2.0)

        (metric,) = to_protobuf(family).metric

        assert metric.summary.sample_count == 4
        assert metric.summary.sample_sum == 2.0
        assert len(metric.summary.quantile) == 0

    def test_histogram_groups_buckets_per_label_set(self):
        family = HistogramMetricFamily("latency_seconds", "Latency", labels=["path"])
        family.add_metric(["/a"], buckets=[("0.1", 2), ("+Inf", 5)], sum_value=1.5)
        family.add_metric(["/b"], buckets=[("0.1", 0), ("+Inf", 1)], sum_value=0.3)

        message = to_protobuf(family)

        assert message.type == schema.HISTOGRAM
        assert len(message.metric) == 2
        first = message.metric[0].histogram
        assert first.sample_count == 5
        assert first.sample_sum == 1.5
        assert [(b.upper_bound, b.cumulative_count) for b in first.bucket] == [
            (0.1, 2),
            (float("inf"), 5),
        ]
        assert message.metric[1].label[0].value == "/b"

    def test_bucket_without_bound_raises(self):
        family = Metric("latency_seconds", "Latency", "histogram")
        family.add_sample("latency_seconds_bucket", {}, 1)

        with pytest.raises(MetricFamilyConversionError, match="latency_seconds"):
            to_protobuf(family)

    def test_non_numeric_quantile_raises(self):
        family = Metric("rpc_seconds", "RPC latency", "summary")
        family.add_sample("rpc_seconds", {"quantile": "median"}, 0.2)

        with pytest.raises(MetricFamilyConversionError):
            to_protobuf(family)


class TestProtobufMetricFamilyMarshaler:
    """Tests for the protobuf-backed marshaler."""

    def test_delimited_round_trip(self):
        marshaler = ProtobufMetricFamilyMarshaler()
        gauge = GaugeMetricFamily("temperature", "Room temperature", value=21.5)

        stream = marshaler.marshal_delimited(_requests()) + marshaler.marshal_delimited(gauge)
        families = parse_delimited(stream)

        assert [f.name for f in families] == ["requests_total", "temperature"]
        assert families[0] == to_protobuf(_requests())
        assert families[1].metric[0].gauge.value == 21.5

    def test_delimited_prefix_is_message_length(self):
        payload = ProtobufMetricFamilyMarshaler().marshal_delimited(_requests())
        size, offset = decode_varint(payload, 0)

        assert size == len(payload) - offset

    def test_truncated_delimited_stream_raises(self):
        payload = ProtobufMetricFamilyMarshaler().marshal_delimited(_requests())

        with pytest.raises(ValueError):
            parse_delimited(payload[:-1])

    def test_text_round_trip(self):
        text = ProtobufMetricFamilyMarshaler().marshal_text(_requests())

        parsed = text_format.Parse(text, schema.MetricFamily())

        assert parsed == to_protobuf(_requests())
        assert "\n" in text.rstrip("\n")

    def test_compact_text_is_single_line(self):
        text = ProtobufMetricFamilyMarshaler().marshal_compact_text(_requests())

        assert "\n" not in text
        assert text_format.Parse(text, schema.MetricFamily()) == to_protobuf(_requests())

    def test_accepts_ready_message(self):
        message = schema.MetricFamily(name="ready", type=schema.GAUGE)
        message.metric.add().gauge.value = 1.0

        (parsed,) = parse_delimited(ProtobufMetricFamilyMarshaler().marshal_delimited(message))

        assert parsed == message
