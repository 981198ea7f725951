"""The ``io.prometheus.client`` metrics schema as protobuf message classes.

The schema is declared as a ``FileDescriptorProto`` and loaded into a
private descriptor pool, so no generated ``_pb2`` module is needed and the
global pool is left untouched.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_PACKAGE = "io.prometheus.client"

_F = descriptor_pb2.FieldDescriptorProto

_OPTIONAL = _F.LABEL_OPTIONAL
_REPEATED = _F.LABEL_REPEATED

# (name, number, label, type, type_name)
_MESSAGES: dict[str, list[tuple[str, int, int, int, str | None]]] = {
    "LabelPair": [
        ("name", 1, _OPTIONAL, _F.TYPE_STRING, None),
        ("value", 2, _OPTIONAL, _F.TYPE_STRING, None),
    ],
    "Gauge": [
        ("value", 1, _OPTIONAL, _F.TYPE_DOUBLE, None),
    ],
    "Counter": [
        ("value", 1, _OPTIONAL, _F.TYPE_DOUBLE, None),
    ],
    "Quantile": [
        ("quantile", 1, _OPTIONAL, _F.TYPE_DOUBLE, None),
        ("value", 2, _OPTIONAL, _F.TYPE_DOUBLE, None),
    ],
    "Summary": [
        ("sample_count", 1, _OPTIONAL, _F.TYPE_UINT64, None),
        ("sample_sum", 2, _OPTIONAL, _F.TYPE_DOUBLE, None),
        ("quantile", 3, _REPEATED, _F.TYPE_MESSAGE, "Quantile"),
    ],
    "Untyped": [
        ("value", 1, _OPTIONAL, _F.TYPE_DOUBLE, None),
    ],
    "Bucket": [
        ("cumulative_count", 1, _OPTIONAL, _F.TYPE_UINT64, None),
        ("upper_bound", 2, _OPTIONAL, _F.TYPE_DOUBLE, None),
    ],
    "Histogram": [
        ("sample_count", 1, _OPTIONAL, _F.TYPE_UINT64, None),
        ("sample_sum", 2, _OPTIONAL, _F.TYPE_DOUBLE, None),
        ("bucket", 3, _REPEATED, _F.TYPE_MESSAGE, "Bucket"),
    ],
    "Metric": [
        ("label", 1, _REPEATED, _F.TYPE_MESSAGE, "LabelPair"),
        ("gauge", 2, _OPTIONAL, _F.TYPE_MESSAGE, "Gauge"),
        ("counter", 3, _OPTIONAL, _F.TYPE_MESSAGE, "Counter"),
        ("summary", 4, _OPTIONAL, _F.TYPE_MESSAGE, "Summary"),
        ("untyped", 5, _OPTIONAL, _F.TYPE_MESSAGE, "Untyped"),
        ("timestamp_ms", 6, _OPTIONAL, _F.TYPE_INT64, None),
        ("histogram", 7, _OPTIONAL, _F.TYPE_MESSAGE, "Histogram"),
    ],
    "MetricFamily": [
        ("name", 1, _OPTIONAL, _F.TYPE_STRING, None),
        ("help", 2, _OPTIONAL, _F.TYPE_STRING, None),
        ("type", 3, _OPTIONAL, _F.TYPE_ENUM, "MetricType"),
        ("metric", 4, _REPEATED, _F.TYPE_MESSAGE, "Metric"),
    ],
}

_METRIC_TYPES = {
    "COUNTER": 0,
    "GAUGE": 1,
    "SUMMARY": 2,
    "UNTYPED": 3,
    "HISTOGRAM": 4,
    "GAUGE_HISTOGRAM": 5,
}


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="io/prometheus/client/metrics.proto",
        package=_PACKAGE,
        syntax="proto2",
    )

    enum = file_proto.enum_type.add(name="MetricType")
    for name, number in _METRIC_TYPES.items():
        enum.value.add(name=name, number=number)

    for message_name, fields in _MESSAGES.items():
        message = file_proto.message_type.add(name=message_name)
        for name, number, label, field_type, type_name in fields:
            field = message.field.add(name=name, number=number, label=label, type=field_type)
            if type_name is not None:
                field.type_name = f".{_PACKAGE}.{type_name}"

    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file().SerializeToString())


def _message_class(name: str) -> type:
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{_PACKAGE}.{name}"))


LabelPair = _message_class("LabelPair")
Gauge = _message_class("Gauge")
Counter = _message_class("Counter")
Quantile = _message_class("Quantile")
Summary = _message_class("Summary")
Untyped = _message_class("Untyped")
Bucket = _message_class("Bucket")
Histogram = _message_class("Histogram")
Metric = _message_class("Metric")
MetricFamily = _message_class("MetricFamily")

COUNTER = _METRIC_TYPES["COUNTER"]
GAUGE = _METRIC_TYPES["GAUGE"]
SUMMARY = _METRIC_TYPES["SUMMARY"]
UNTYPED = _METRIC_TYPES["UNTYPED"]
HISTOGRAM = _METRIC_TYPES["HISTOGRAM"]
GAUGE_HISTOGRAM = _METRIC_TYPES["GAUGE_HISTOGRAM"]
