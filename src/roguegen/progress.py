"""
Progress markers emitted by generation steps.

Purely informational: nothing in the engine reads anything back. Markers are
always logged at DEBUG; when FLAGS.debug_progress is on they are also handed
to every registered hook (viewers, step-through debuggers, test probes).
"""

import logging
from typing import Callable, List

from . import config

logger = logging.getLogger(__name__)

ProgressHook = Callable[[str], None]

_hooks: List[ProgressHook] = []

def add_progress_hook(hook: ProgressHook) -> None:
    _hooks.append(hook)

def remove_progress_hook(hook: ProgressHook) -> None:
    if hook in _hooks:
        _hooks.remove(hook)

def clear_progress_hooks() -> None:
    _hooks.clear()

def debug_progress(label: str) -> None:
    logger.debug("progress: %s", label)
    if not config.FLAGS.debug_progress:
        return
    for hook in list(_hooks):
        hook(label)
