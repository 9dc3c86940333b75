import os
from dataclasses import dataclass, replace

@dataclass(frozen=True)
class GenFlags:
    # Forward progress markers to registered hooks (they are always logged at DEBUG).
    debug_progress: bool = False
    # Reject grid rooms that fall outside the grid or overlap another room.
    strict_plans: bool = True

# Global flags (can be swapped by launcher)
FLAGS = GenFlags()

_FALSE_WORDS = {"0", "false", "no", "off", ""}

def _env_bool(name: str, default: bool) -> bool:
    if name not in os.environ:
        return default
    return os.environ[name].strip().lower() not in _FALSE_WORDS

def flags_from_env(base: GenFlags = GenFlags()) -> GenFlags:
    """Overlay ROGUEGEN_* environment variables on top of `base`."""
    return GenFlags(
        debug_progress=_env_bool("ROGUEGEN_DEBUG_PROGRESS", base.debug_progress),
        strict_plans=_env_bool("ROGUEGEN_STRICT_PLANS", base.strict_plans),
    )

def set_flags(**changes) -> GenFlags:
    """Swap the global flags; returns the previous value so callers can restore it."""
    global FLAGS
    previous = FLAGS
    FLAGS = replace(FLAGS, **changes)
    return previous

def restore_flags(flags: GenFlags) -> None:
    global FLAGS
    FLAGS = flags

def load_env_flags() -> GenFlags:
    """Apply ROGUEGEN_* overrides to the global flags; returns the previous value."""
    global FLAGS
    previous = FLAGS
    FLAGS = flags_from_env(FLAGS)
    return previous
