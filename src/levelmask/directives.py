"""
Directive mini-language for level strings.

A level string is a whitespace-separated list of directives:

    directive     := [modifier "."] severity_name
    modifier      := at | gt | gte | lt | lte        (any case)
    severity_name := a name from the scale          (any case)

Examples:
    "warn"                  # same as gte.warn
    "gte.info lte.error"    # info through error
    "at.debug at.error"     # debug and error only

A directive with no modifier means gte. Tokens that do not fit the
grammar are skipped (and reported on the 'parse' channel), so a garbled
or version-skewed level string still configures whatever it can.
"""

import enum
from dataclasses import dataclass
from typing import List, Optional

from .lib.log_lib import get_output, trace
from .lib.log_lib.levels import DETAIL
from .scale import DEFAULT_SCALE, SeverityScale


class Modifier(enum.Enum):
    """The five ways a directive can shape a Level's mask."""
    AT = 'at'
    GT = 'gt'
    GTE = 'gte'
    LT = 'lt'
    LTE = 'lte'

    @classmethod
    def parse(cls, text: str) -> Optional['Modifier']:
        """Modifier for a (case-insensitive) keyword, or None."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Directive:
    """One parsed `[modifier.]severity` token.

    Attributes:
        modifier: How the severity shapes the mask
        index: The severity's position on the scale
        token: The raw text the directive came from
    """
    modifier: Modifier
    index: int
    token: str = ''


def parse_directive(token: str, scale: SeverityScale = DEFAULT_SCALE) -> Optional[Directive]:
    """Parse a single token, returning None when it does not fit the grammar."""
    head, dot, tail = token.partition('.')
    if dot:
        modifier = Modifier.parse(head)
        name = tail
    else:
        modifier = Modifier.GTE
        name = head
    if modifier is None or not name:
        return None
    index = scale.index(name)
    if index is None:
        return None
    return Directive(modifier=modifier, index=index, token=token)


@trace
def parse_directives(text: str, scale: SeverityScale = DEFAULT_SCALE) -> List[Directive]:
    """Split a level string into directives, in left-to-right order.

    Args:
        text: Level string such as "gte.info lte.error"
        scale: Scale the severity names are resolved against

    Returns:
        Directives for every token that parsed; skipped tokens are
        reported at DETAIL on the 'parse' channel.
    """
    directives = []
    for token in text.split():
        directive = parse_directive(token, scale)
        if directive is None:
            get_output().emit(DETAIL, "skipped directive {token!r} in {text!r}",
                              channel='parse', token=token, text=text)
            continue
        directives.append(directive)
    return directives
