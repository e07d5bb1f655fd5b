"""
Level — the boolean mask that decides which severities are enabled.

A Level starts unrestricted (every severity enabled) and is shaped by
modifiers:

    at('warn')      # warn only
    gt('warn')      # error and above
    gte('warn')     # warn and above
    lt('warn')      # info and below
    lte('warn')     # warn and below

Modifiers combine. The first modifier on a fresh Level clears whatever
it does not select; every later range modifier only narrows what is
still enabled. `at` is the exception: once the Level is constrained, it
adds its severity to the mask, so a run of `at` calls builds a union.

    Level('info').lte('error')          # info through error
    Level('info').lt('error')           # info and warn
    Level().at('debug', 'error')        # debug and error
    Level('gt.warn gte.info')           # error and above

Unknown severities never raise: a modifier given one does nothing and
a query for one answers False.
"""

import enum
from typing import List, NamedTuple, Optional, Tuple

from .directives import Modifier, parse_directives
from .lib.log_lib import get_output
from .lib.log_lib.levels import DETAIL, TRACE
from .scale import DEFAULT_SCALE, SeverityScale


class MaskState(enum.Enum):
    """Whether any modifier has shaped the mask yet.

    UNCONSTRAINED → CONSTRAINED happens once, on the first modifier call
    that resolves its severity, and never goes back.
    """
    UNCONSTRAINED = 'unconstrained'
    CONSTRAINED = 'constrained'


class SeverityRange(NamedTuple):
    """Inclusive span of severities, lowest first: SeverityRange('info', 'error')."""
    lo: object
    hi: object


class Level:
    """Severity mask with chainable modifiers and an enabled_at() query.

    Args:
        spec: Initial specification, one of:
            None                    unrestricted
            'gte.info lte.error'    directive string (a bare name means gte)
            2                       minimum severity by index
            ['info', 'error']       exactly these severities (at)
            SeverityRange(lo, hi)   lo through hi, inclusive
            range(1, 4)             indices 1, 2 and 3
        at, gt, gte, lt, lte: Keyword modifiers, applied after spec in the
            order at, gte, gt, lte, lt. `at` also accepts a list.
        scale: Severity scale the mask is laid over
    """

    def __init__(self, spec=None, *, at=None, gt=None, gte=None, lt=None,
                 lte=None, scale: SeverityScale = DEFAULT_SCALE):
        self.scale = scale
        self._severities: List[bool] = [True] * len(scale)
        self._state = MaskState.UNCONSTRAINED

        self._apply_spec(spec)

        if isinstance(at, (list, tuple)):
            self.at(*at)
        elif at is not None:
            self.at(at)
        if gte is not None:
            self.gte(gte)
        if gt is not None:
            self.gt(gt)
        if lte is not None:
            self.lte(lte)
        if lt is not None:
            self.lt(lt)

    # -------------------------------------------------------------------------
    # Modifiers
    # -------------------------------------------------------------------------
    def at(self, *severities) -> 'Level':
        """Enable exactly the given severities.

        On a fresh Level the first resolvable severity clears the mask;
        the rest are added to it.
        """
        for severity in severities:
            self.apply(Modifier.AT, severity)
        return self

    def gt(self, severity) -> 'Level':
        """Keep only severities above the given one."""
        return self.apply(Modifier.GT, severity)

    def gte(self, severity) -> 'Level':
        """Keep only the given severity and those above it."""
        return self.apply(Modifier.GTE, severity)

    def lt(self, severity) -> 'Level':
        """Keep only severities below the given one."""
        return self.apply(Modifier.LT, severity)

    def lte(self, severity) -> 'Level':
        """Keep only the given severity and those below it."""
        return self.apply(Modifier.LTE, severity)

    def apply(self, modifier: Modifier, severity) -> 'Level':
        """Apply one modifier to one severity (name or index).

        An unresolvable severity leaves the Level untouched.
        """
        index = self.scale.index(severity)
        if index is None:
            get_output().emit(DETAIL, "ignored {mod}({sev!r}): not on the scale",
                              channel='modifier', mod=modifier.value, sev=severity)
            return self
        self._combine(modifier, index)
        return self

    def _combine(self, modifier: Modifier, index: int) -> None:
        if modifier is Modifier.AT:
            if self._state is MaskState.UNCONSTRAINED:
                self._severities = [False] * len(self._severities)
            self._severities[index] = True
        else:
            for i, enabled in enumerate(self._severities):
                if not enabled:
                    continue
                if modifier is Modifier.GT:
                    keep = i > index
                elif modifier is Modifier.GTE:
                    keep = i >= index
                elif modifier is Modifier.LT:
                    keep = i < index
                else:
                    keep = i <= index
                self._severities[i] = keep

        self._state = MaskState.CONSTRAINED

        out = get_output()
        if out.enabled(TRACE, 'modifier'):
            out.emit(TRACE, "{mod}.{sev} -> {names}", channel='modifier',
                     mod=modifier.value, sev=self.scale.name(index),
                     names=', '.join(self.enabled_names()) or '(none)')

    def _apply_spec(self, spec) -> None:
        if spec is None:
            return
        # SeverityRange is a tuple; match it before the list/tuple branch
        if isinstance(spec, SeverityRange):
            self.gte(spec.lo).lte(spec.hi)
        elif isinstance(spec, range):
            self.gte(spec.start).lt(spec.stop)
        elif isinstance(spec, (list, tuple)):
            self.at(*spec)
        elif isinstance(spec, str):
            for directive in parse_directives(spec, self.scale):
                self._combine(directive.modifier, directive.index)
        elif isinstance(spec, int) and not isinstance(spec, bool):
            self.gte(spec)
        else:
            get_output().emit(DETAIL, "ignored level spec of type {kind}",
                              channel='modifier', kind=type(spec).__name__)

    # -------------------------------------------------------------------------
    # Query and introspection
    # -------------------------------------------------------------------------
    def enabled_at(self, severity) -> bool:
        """True when the severity (name or index) is enabled.

        Unknown names and out-of-range indices answer False.
        """
        index = self.scale.index(severity)
        return False if index is None else self._severities[index]

    __contains__ = enabled_at

    def minimum_enabled_index(self) -> Optional[int]:
        """Index of the least severe enabled severity, None if none are."""
        for i, enabled in enumerate(self._severities):
            if enabled:
                return i
        return None

    def enabled_names(self) -> List[str]:
        """Lower-case names of the enabled severities, in scale order."""
        return [self.scale.name(i) for i, enabled in enumerate(self._severities) if enabled]

    def describe(self) -> str:
        return f"Level severities: {', '.join(self.enabled_names())}"

    @property
    def severities(self) -> Tuple[bool, ...]:
        return tuple(self._severities)

    @property
    def state(self) -> MaskState:
        return self._state

    @property
    def tainted(self) -> bool:
        """True once a modifier has shaped the mask."""
        return self._state is MaskState.CONSTRAINED

    def __eq__(self, other) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.scale == other.scale and self._severities == other._severities

    # Mutable: modifiers change the mask in place
    __hash__ = None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} severities: {', '.join(self.enabled_names())}>"
