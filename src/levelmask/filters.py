"""
logging.Filter adapter: gate stdlib log records through a Level.

    handler = logging.StreamHandler()
    handler.addFilter(LevelFilter('gte.info lte.error'))

Record levels map onto the default scale by threshold, so custom
stdlib levels land on the nearest standard level below them:

    levelno >= CRITICAL  →  fatal
    levelno >= ERROR     →  error
    levelno >= WARNING   →  warn
    levelno >= INFO      →  info
    otherwise            →  debug
"""

import logging

from .helpers import LevelMixin
from .lib.log_lib import get_output
from .lib.log_lib.levels import DETAIL, TRACE

_LEVELNO_THRESHOLDS = (
    (logging.CRITICAL, 'fatal'),
    (logging.ERROR, 'error'),
    (logging.WARNING, 'warn'),
    (logging.INFO, 'info'),
)


def severity_for_levelno(levelno: int) -> str:
    """Default-scale severity name for a stdlib logging level number."""
    for threshold, name in _LEVELNO_THRESHOLDS:
        if levelno >= threshold:
            return name
    return 'debug'


class LevelFilter(logging.Filter, LevelMixin):
    """Pass a record only when its severity is enabled on the Level.

    Records are named with default-scale severities, so a Level laid over
    a custom scale without those names drops every record (reported at
    DETAIL on the 'filter' channel).

    Args:
        level: A Level or any Level() spec (default: unrestricted)
        name: Logger name prefix, as for logging.Filter
    """

    def __init__(self, level=None, name: str = ''):
        super().__init__(name)
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        if not super().filter(record):
            return False
        severity = severity_for_levelno(record.levelno)
        out = get_output()
        if severity not in self.level.scale:
            out.emit(DETAIL, "dropped {logger} {levelname}: {sev!r} is not on {scale!r}",
                     channel='filter', logger=record.name,
                     levelname=record.levelname, sev=severity,
                     scale=self.level.scale)
            return False
        allowed = self.level.enabled_at(severity)
        if out.enabled(TRACE, 'filter'):
            out.emit(TRACE, "{logger} {levelname} as {sev}: {verdict}",
                     channel='filter', logger=record.name,
                     levelname=record.levelname, sev=severity,
                     verdict='pass' if allowed else 'drop')
        return allowed
