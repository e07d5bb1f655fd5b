"""
Severity scale — the fixed, ordered table of severity names.

A scale is built once and never mutated. Index 0 is the least severe
entry, index N-1 the most severe. Names, lower-case names and raw
integer indices are interchangeable ways to address an entry:

    ←── less severe ───────────────── more severe ──→
      0      1      2      3      4       5
    DEBUG  INFO   WARN  ERROR  FATAL  UNKNOWN

Every Level holds a reference to its scale; DEFAULT_SCALE is what
Level uses unless another scale is passed in.
"""

from typing import Iterator, Optional, Sequence, Tuple


class SeverityScale:
    """Immutable, case-insensitive registration table of severity names.

    Usage::

        scale = SeverityScale(("LOW", "MID", "HIGH"))
        scale.index("mid")     # 1
        scale.index(2)         # 2
        scale.index("nope")    # None
    """

    __slots__ = ('_names', '_lookup')

    def __init__(self, names: Sequence[str]):
        normalized = tuple(str(n).strip().upper() for n in names)
        if not normalized:
            raise ValueError("a severity scale needs at least one name")
        if not all(normalized):
            raise ValueError(f"empty severity name in {normalized!r}")
        if len(set(normalized)) != len(normalized):
            raise ValueError(f"duplicate severity names in {normalized!r}")
        self._names: Tuple[str, ...] = normalized
        self._lookup = {name: i for i, name in enumerate(normalized)}

    @property
    def names(self) -> Tuple[str, ...]:
        """Upper-case names in scale order."""
        return self._names

    def index(self, severity) -> Optional[int]:
        """Resolve a severity to its scale index.

        Args:
            severity: Name (any case) or integer index

        Returns:
            The index, or None when the name is unknown, the index is out
            of range, or the value is neither a str nor an int.
        """
        # bool is an int subclass; True/False are not severities
        if isinstance(severity, bool):
            return None
        if isinstance(severity, int):
            return severity if 0 <= severity < len(self._names) else None
        if isinstance(severity, str):
            return self._lookup.get(severity.strip().upper())
        return None

    def name(self, index: int) -> str:
        """Lower-case name at index (raises IndexError when out of range)."""
        return self._names[index].lower()

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, severity) -> bool:
        return self.index(severity) is not None

    def __eq__(self, other) -> bool:
        if not isinstance(other, SeverityScale):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"SeverityScale({', '.join(self._names)})"


DEFAULT_SCALE = SeverityScale(("DEBUG", "INFO", "WARN", "ERROR", "FATAL", "UNKNOWN"))
