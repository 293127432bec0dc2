"""Metric catalog: the fixed, ordered identities this exporter can produce.

The catalog is built once at import and never mutated. Collectors receive it
by injection so tests can substitute a different table.
"""

from dataclasses import dataclass

NAMESPACE = "presto_cluster"


def build_fq_name(namespace: str, subsystem: str, name: str) -> str:
    """Join non-empty name parts with underscores."""
    return "_".join(part for part in (namespace, subsystem, name) if part)


@dataclass(frozen=True)
class MetricIdentity:
    """Externally visible identity of one gauge.

    Attributes:
        name: Fully qualified metric name.
        help: Help text shown in the exposition output.
        field: Name of the ``StatusSnapshot`` attribute that supplies the value.
    """

    name: str
    help: str
    field: str


def _identity(name: str, help_text: str) -> MetricIdentity:
    return MetricIdentity(
        name=build_fq_name(NAMESPACE, "", name),
        help=help_text,
        field=name,
    )


CATALOG: tuple[MetricIdentity, ...] = (
    _identity("running_queries", "Running requests of the presto cluster."),
    _identity("blocked_queries", "Blocked queries of the presto cluster."),
    _identity("queued_queries", "Queued queries of the presto cluster."),
    _identity("active_workers", "Active workers of the presto cluster."),
    _identity("running_drivers", "Running drivers of the presto cluster."),
    _identity("reserved_memory", "Reserved memory of the presto cluster."),
    _identity("total_input_rows", "Total input rows of the presto cluster."),
    _identity("total_input_bytes", "Total input bytes of the presto cluster."),
    _identity("total_cpu_time_secs", "Total cpu time of the presto cluster."),
)


def describe(catalog: tuple[MetricIdentity, ...] = CATALOG) -> tuple[MetricIdentity, ...]:
    """Return the catalog identities in their fixed order."""
    return catalog
