"""Unit tests for the plain-text exposition adapter."""

from io import BytesIO

from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily
from prometheus_client.parser import text_string_to_metric_families

from metricfmt.adapters.text_encoder import FakeTextEncoder, PrometheusTextEncoder


def _samples(text: str) -> list[tuple[str, dict[str, str], float]]:
    return [
        (s.name, s.labels, s.value)
        for family in text_string_to_metric_families(text)
        for s in family.samples
    ]


class TestFakeTextEncoder:
    """Tests for the FakeTextEncoder test helper."""

    def test_writes_marker_and_records_family(self):
        fake = FakeTextEncoder()
        sink = BytesIO()
        family = GaugeMetricFamily("temperature", "Room temperature", value=21.5)

        written = fake.write(sink, family)

        assert sink.getvalue() == b"# fake temperature\n"
        assert written == len(sink.getvalue())
        assert fake.families == [family]

    def test_clear_resets_all_state(self):
        fake = FakeTextEncoder()
        fake.write(BytesIO(), GaugeMetricFamily("temperature", "Room temperature", value=1))

        fake.clear()

        assert fake.families == []


class TestPrometheusTextEncoder:
    """Tests for the prometheus-client backed text encoder."""

    def test_writes_help_type_and_samples(self):
        family = CounterMetricFamily("requests", "Requests served", labels=["code"])
        family.add_metric(["200"], 3)
        sink = BytesIO()

        PrometheusTextEncoder().write(sink, family)

        output = sink.getvalue().decode()
        assert "# HELP requests_total Requests served\n" in output
        assert "# TYPE requests_total counter\n" in output
        assert 'requests_total{code="200"} 3.0\n' in output

    def test_returns_number_of_bytes_written(self):
        sink = BytesIO()

        written = PrometheusTextEncoder().write(
            sink, GaugeMetricFamily("temperature", "Room temperature", value=21.5)
        )

        assert written == len(sink.getvalue())

    def test_every_line_is_newline_terminated(self):
        sink = BytesIO()

        PrometheusTextEncoder().write(
            sink, GaugeMetricFamily("temperature", "Room temperature", value=21.5)
        )

        assert sink.getvalue().endswith(b"\n")

    def test_consecutive_families_round_trip(self):
        encoder = PrometheusTextEncoder()
        sink = BytesIO()
        requests = CounterMetricFamily("requests", "Requests served", labels=["code"])
        requests.add_metric(["200"], 3)
        requests.add_metric(["500"], 1)
        temperature = GaugeMetricFamily("temperature", "Room temperature", labels=["room"])
        temperature.add_metric(["kitchen"], 21.5)

        encoder.write(sink, requests)
        encoder.write(sink, temperature)

        assert _samples(sink.getvalue().decode()) == [
            ("requests_total", {"code": "200"}, 3.0),
            ("requests_total", {"code": "500"}, 1.0),
            ("temperature", {"room": "kitchen"}, 21.5),
        ]
