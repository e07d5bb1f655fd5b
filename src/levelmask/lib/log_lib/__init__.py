"""
log_lib — THAC0 verbosity system with named channels.

Diagnostic output for levelmask itself:
- Single-axis THAC0 verbosity (level <= threshold)
- Named channels with per-channel overrides
- Function tracing decorator

Public API:
    OutputManager      — verbosity-gated writer
    init_output        — singleton initialization
    get_output         — access singleton
    ChannelConfig      — channel configuration
    parse_channel_spec — parse a NAME[:LEVEL] channel spec
    KNOWN_CHANNELS     — set of recognized channel names
    trace              — function tracing decorator
"""

from .manager import OutputManager, init_output, get_output
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS,
    OPT_IN_CHANNELS,
)
from .trace import trace

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'OPT_IN_CHANNELS',
    'trace',
]
