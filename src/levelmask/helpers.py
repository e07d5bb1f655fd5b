"""
Level setter mixin for objects that own a Level.

Loggers, handlers and filters mix this in to get a `level` attribute
that accepts anything Level() does:

    class MyHandler(LevelMixin):
        ...

    handler = MyHandler()
    handler.level = 'gte.info lte.error'
    handler.level = ['debug', 'error']
    handler.level = Level().gt('warn')     # kept as-is, not copied
"""

from .level import Level


class LevelMixin:
    """Adds a `level` property holding a Level."""

    _level: Level = None

    @property
    def level(self) -> Level:
        """The owned Level; unrestricted until assigned."""
        if self._level is None:
            self._level = Level()
        return self._level

    @level.setter
    def level(self, severity) -> None:
        """Set the level from a Level instance or any Level() spec.

        Args:
            severity: A Level (reused), or a spec wrapped in a new Level
        """
        if isinstance(severity, Level):
            self._level = severity
        else:
            self._level = Level(severity)
