"""levelmask — severity masks for log gating.

A Level is a boolean mask over an ordered severity scale
(DEBUG < INFO < WARN < ERROR < FATAL < UNKNOWN), shaped by chainable
modifiers or a small directive language, and queried with enabled_at().
"""

from levelmask._version import __version__, __app_name__
from levelmask.scale import SeverityScale, DEFAULT_SCALE
from levelmask.directives import Directive, Modifier, parse_directives
from levelmask.level import Level, MaskState, SeverityRange
from levelmask.helpers import LevelMixin
from levelmask.filters import LevelFilter, severity_for_levelno

__all__ = [
    "__version__", "__app_name__",
    "SeverityScale", "DEFAULT_SCALE",
    "Directive", "Modifier", "parse_directives",
    "Level", "MaskState", "SeverityRange",
    "LevelMixin",
    "LevelFilter", "severity_for_levelno",
]
