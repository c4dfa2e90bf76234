# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Updated by the service layer only; exposed by the system controller.
"""

from prometheus_client import Counter, Gauge

MEMBERS_JOINED = Counter(
    "member_joins_total",
    "Total members successfully joined",
)
DUPLICATE_REJECTIONS = Counter(
    "member_duplicate_rejections_total",
    "Total join attempts rejected because the name already exists",
)
MEMBER_LOOKUPS = Counter(
    "member_lookups_total",
    "Total member lookups performed",
    ["kind"],
)
STORE_SIZE = Gauge(
    "member_store_size",
    "Number of members held by the repository",
)
