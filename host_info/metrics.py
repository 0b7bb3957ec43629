"""Helpers for collecting host system metrics."""
from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Sequence, Tuple, TypeVar

import psutil

from .formatting import format_bytes, format_uptime

logger = logging.getLogger(__name__)

CPU_SAMPLE_INTERVAL = 0.1
ROOT_PATH = "/"

T = TypeVar("T")


class CollectionError(RuntimeError):
    """Raised when one of the host readings could not be taken."""

    def __init__(self, reading: str) -> None:
        super().__init__(f"Failed to read {reading}")
        self.reading = reading


class MetricsSource(ABC):
    """Raw host readings consumed by :func:`collect_system_info`."""

    @abstractmethod
    def per_core_cpu_percent(self) -> Sequence[float]:
        """Utilization of each logical core, in core order."""
        ...

    @abstractmethod
    def memory_used(self) -> int:
        ...

    @abstractmethod
    def disk_used(self, path: str) -> int:
        """Bytes in use on the filesystem mounted at ``path``."""
        ...

    @abstractmethod
    def uptime_seconds(self) -> int:
        ...


class PsutilMetricsSource(MetricsSource):
    """Reads the local host through psutil."""

    def __init__(self, cpu_sample_interval: float = CPU_SAMPLE_INTERVAL) -> None:
        self.cpu_sample_interval = cpu_sample_interval

    def per_core_cpu_percent(self) -> Sequence[float]:
        # Blocks for the sample interval.
        return psutil.cpu_percent(interval=self.cpu_sample_interval, percpu=True)

    def memory_used(self) -> int:
        return psutil.virtual_memory().used

    def disk_used(self, path: str) -> int:
        return psutil.disk_usage(path).used

    def uptime_seconds(self) -> int:
        return int(max(0, time.time() - psutil.boot_time()))


@dataclass(frozen=True)
class SystemSnapshot:
    cpu_details: Tuple[str, ...]
    memory_used: str
    disk_used: str
    uptime: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cpu": list(self.cpu_details),
            "memory": self.memory_used,
            "disk": self.disk_used,
            "uptime": self.uptime,
        }


def _cpu_label(index: int, percent: float) -> str:
    return f"CPU {index}: {percent:.2f}%"


def _read(reading: str, func: Callable[[], T]) -> T:
    try:
        return func()
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Failed to read %s: %s", reading, exc)
        raise CollectionError(reading) from exc


def collect_system_info(source: MetricsSource | None = None) -> SystemSnapshot:
    """Take one reading of each metric and format them into a snapshot.

    The first failing reading aborts the collection with a
    :class:`CollectionError`; no partial snapshot is ever returned.
    """
    source = source or PsutilMetricsSource()

    cpu_percents = _read("cpu", source.per_core_cpu_percent)
    memory_used = _read("memory", source.memory_used)
    disk_used = _read("disk", lambda: source.disk_used(ROOT_PATH))
    uptime_seconds = _read("uptime", source.uptime_seconds)

    return SystemSnapshot(
        cpu_details=tuple(
            _cpu_label(index, percent) for index, percent in enumerate(cpu_percents, start=1)
        ),
        memory_used=format_bytes(memory_used),
        disk_used=format_bytes(disk_used),
        uptime=format_uptime(uptime_seconds),
    )
