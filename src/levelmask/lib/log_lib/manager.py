"""
OutputManager — THAC0 verbosity gate for levelmask diagnostics.

A message shows when message.level <= threshold, where the threshold is
the channel's override if one is set, otherwise the global verbosity.
At threshold -4 (hard wall) nothing is shown at all.

    out = init_output(verbosity=1, channels=['modifier:3'])
    out.emit(DETAIL, "ignored severity {s!r}", channel='modifier', s='nope')

The manager is a process-wide singleton; levelmask code reaches it with
get_output(), which builds a silent-by-default manager on first use.
"""

import sys
from typing import Any, Dict, Iterable, Optional, TextIO

from .channels import parse_channel_spec, OPT_IN_CHANNELS
from .levels import DEFAULT, NOTHING, QUIET


class OutputManager:
    """Verbosity-gated writer with per-channel threshold overrides.

    All output goes to the configured file handle (default: stderr).
    """

    def __init__(
        self,
        verbosity: int = DEFAULT,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def enabled(self, level: int, channel: str = 'general') -> bool:
        """True when a message at this level would be written on channel.

        Callers use this to skip building expensive message arguments.
        """
        threshold = self.threshold(channel)
        return threshold > NOTHING and level <= threshold

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Write message if level <= threshold for that channel.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (str.format with kwargs)
            channel: Diagnostic channel name
            **kwargs: Values for template placeholders
        """
        if not self.enabled(level, channel):
            return
        text = message.format(**kwargs) if kwargs else message
        print(f"[levelmask:{channel}] {text}", file=self.file)


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = DEFAULT, channels: Iterable[str] = None,
                file: TextIO = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Args:
        verbosity: Global THAC0 verbosity (0=default, positive=louder)
        channels: Channel spec strings (e.g., ['modifier:3', 'trace'])
        file: Destination stream (default: stderr)

    Returns:
        The initialized OutputManager instance
    """
    global _manager

    # Opt-in channels start below the default threshold
    channel_overrides = {ch: QUIET for ch in OPT_IN_CHANNELS}

    for spec in channels or ():
        cfg = parse_channel_spec(spec)
        if cfg.name:
            channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = init_output()
    return _manager
