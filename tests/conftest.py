from __future__ import annotations

from typing import Optional, Sequence

import pytest

from host_info.metrics import MetricsSource


class FixtureSource(MetricsSource):
    """Deterministic readings; set ``fail`` to the name of a reading to make it raise."""

    def __init__(
        self,
        cpu: Sequence[float] = (12.34, 5.67),
        memory: int = 3435973837,
        disk: int = 129385889792,
        uptime: int = 184500,
        fail: Optional[str] = None,
    ) -> None:
        self.cpu = cpu
        self.memory = memory
        self.disk = disk
        self.uptime = uptime
        self.fail = fail
        self.disk_paths = []

    def _check(self, reading: str) -> None:
        if self.fail == reading:
            raise OSError(f"{reading} unavailable")

    def per_core_cpu_percent(self) -> Sequence[float]:
        self._check("cpu")
        return list(self.cpu)

    def memory_used(self) -> int:
        self._check("memory")
        return self.memory

    def disk_used(self, path: str) -> int:
        self.disk_paths.append(path)
        self._check("disk")
        return self.disk

    def uptime_seconds(self) -> int:
        self._check("uptime")
        return self.uptime


@pytest.fixture
def source() -> FixtureSource:
    return FixtureSource()
