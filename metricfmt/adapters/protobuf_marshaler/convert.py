"""Conversion from prometheus-client metric families to protobuf messages.

Family names and types follow the text exposition: counters gain a
``_total`` suffix, info families an ``_info`` suffix, info and stateset
families are exposed as gauges. ``_created`` samples have no place in the
schema and are dropped.
"""

from __future__ import annotations

from typing import Any

from prometheus_client import Metric

from metricfmt.adapters.protobuf_marshaler import schema
from metricfmt.core.exceptions import MetricFamilyConversionError

_TYPES = {
    "counter": schema.COUNTER,
    "gauge": schema.GAUGE,
    "info": schema.GAUGE,
    "stateset": schema.GAUGE,
    "summary": schema.SUMMARY,
    "histogram": schema.HISTOGRAM,
    "gaugehistogram": schema.GAUGE_HISTOGRAM,
    "untyped": schema.UNTYPED,
    "unknown": schema.UNTYPED,
}

_NAME_SUFFIXES = {"counter": "_total", "info": "_info"}

# Label that distinguishes samples within one metric rather than metrics.
_STRUCTURAL_LABELS = {"summary": "quantile", "histogram": "le", "gaugehistogram": "le"}


def _family_name(family: Metric) -> str:
    return family.name + _NAME_SUFFIXES.get(family.type, "")


def _timestamp_ms(timestamp: Any) -> int | None:
    if timestamp is None:
        return None
    return int(round(float(timestamp) * 1000))


def _parse_bound(family: Metric, label: str, raw: str | None) -> float:
    if raw is None:
        raise MetricFamilyConversionError(family.name, f"sample without {label!r} label")
    try:
        return float(raw)
    except ValueError:
        raise MetricFamilyConversionError(
            family.name, f"{label}={raw!r} is not a number"
        ) from None


def _fill(family: Metric, metric: Any, suffix: str, labels: dict[str, str], value: float) -> None:
    kind = family.type

    if kind == "counter":
        metric.counter.value = value
    elif kind in ("gauge", "info", "stateset"):
        metric.gauge.value = value
    elif kind == "summary":
        if suffix == "_count":
            metric.summary.sample_count = int(value)
        elif suffix == "_sum":
            metric.summary.sample_sum = value
        else:
            quantile = metric.summary.quantile.add()
            quantile.quantile = _parse_bound(family, "quantile", labels.get("quantile"))
            quantile.value = value
    elif kind in ("histogram", "gaugehistogram"):
        if suffix in ("_count", "_gcount"):
            metric.histogram.sample_count = int(value)
        elif suffix in ("_sum", "_gsum"):
            metric.histogram.sample_sum = value
        elif suffix == "_bucket":
            bucket = metric.histogram.bucket.add()
            bucket.cumulative_count = int(value)
            bucket.upper_bound = _parse_bound(family, "le", labels.get("le"))
    else:
        metric.untyped.value = value


def to_protobuf(family: Metric) -> Any:
    """Build an ``io.prometheus.client.MetricFamily`` message from ``family``.

    Raises:
        MetricFamilyConversionError: a histogram or summary sample is missing
            its ``le``/``quantile`` label, or the label is not numeric.
    """
    message = schema.MetricFamily(
        name=_family_name(family),
        help=family.documentation,
        type=_TYPES.get(family.type, schema.UNTYPED),
    )

    structural = _STRUCTURAL_LABELS.get(family.type)
    metrics: dict[tuple[tuple[str, str], ...], Any] = {}

    for sample in family.samples:
        suffix = sample.name[len(family.name):] if sample.name.startswith(family.name) else ""
        if suffix == "_created":
            continue

        identity = tuple(sorted((k, v) for k, v in sample.labels.items() if k != structural))

        metric = metrics.get(identity)
        if metric is None:
            metric = message.metric.add()
            for name, value in identity:
                metric.label.add(name=name, value=value)
            metrics[identity] = metric

        timestamp_ms = _timestamp_ms(sample.timestamp)
        if timestamp_ms is not None:
            metric.timestamp_ms = timestamp_ms

        _fill(family, metric, suffix, sample.labels, sample.value)

    return message
