"""Report host CPU, memory, disk, and uptime over HTTP."""
from .api import create_app
from .formatting import format_bytes, format_uptime
from .metrics import CollectionError, MetricsSource, SystemSnapshot, collect_system_info

__version__ = "0.1.0"

__all__ = [
    "CollectionError",
    "MetricsSource",
    "SystemSnapshot",
    "collect_system_info",
    "create_app",
    "format_bytes",
    "format_uptime",
]
