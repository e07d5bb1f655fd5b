"""
Diagnostic channels for the THAC0 verbosity system.

Each channel names one area of levelmask that can talk about what it
is doing. A channel can carry its own threshold, overriding the global
verbosity.

Channel spec syntax:
    CHANNEL[:LEVEL]

    Examples:
        parse           # Level 0
        modifier:3      # Show every applied modifier
        config:-4       # Silence config diagnostics entirely
"""

from dataclasses import dataclass


KNOWN_CHANNELS = {
    'modifier',     # Modifier application and ignored severities
    'parse',        # Directive string parsing
    'config',       # Config file discovery and resolution
    'filter',       # logging.Filter decisions
    'trace',        # Function tracing (@trace decorator)
    'general',      # Default channel
}

# Channels that stay silent until explicitly enabled with a spec.
OPT_IN_CHANNELS = {
    'trace',
}


@dataclass
class ChannelConfig:
    """Threshold override for a single diagnostic channel."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a channel spec string into a ChannelConfig.

    A missing or empty level slot means level 0. A level that is not an
    integer is ignored (level 0), so a typo in a spec never stops
    a program from starting.

    Args:
        spec: Channel spec string like "parse" or "modifier:3"

    Returns:
        ChannelConfig with parsed values
    """
    name, _, level_text = spec.strip().partition(':')
    level = 0
    if level_text:
        try:
            level = int(level_text)
        except ValueError:
            level = 0
    return ChannelConfig(name=name, level=level)

