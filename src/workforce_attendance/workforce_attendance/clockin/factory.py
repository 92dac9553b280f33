from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import WorkMode
from .strategies.base import ClockInStrategy
from .strategies.onsite_strategy import OnSiteStrategy
from .strategies.remote_strategy import RemoteModeStrategy


@dataclass
class ClockInStrategyFactory:
    """Factory Pattern: choose the placement strategy for a work mode."""

    def for_work_mode(self, work_mode: WorkMode | str) -> ClockInStrategy:
        if WorkMode(work_mode) == WorkMode.REMOTE:
            return RemoteModeStrategy()
        return OnSiteStrategy()
