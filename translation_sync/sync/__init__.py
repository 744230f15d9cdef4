"""Run orchestration: sync and init operations."""

from .delay import RequestDelayManager
from .orchestrator import SyncState, TranslationSync, run_init, run_sync

__all__ = [
    "RequestDelayManager",
    "SyncState",
    "TranslationSync",
    "run_init",
    "run_sync",
]
