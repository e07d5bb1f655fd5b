"""
Function tracing decorator.

Routes call tracing through the OutputManager singleton at TRACE on the
'trace' channel. The channel is opt-in, so tracing costs one threshold
lookup per call until someone asks for it.
"""

import functools

from .levels import TRACE


def _short_repr(value) -> str:
    """repr() clipped so long directive strings stay on one line."""
    text = repr(value)
    if len(text) > 60:
        return text[:57] + '...'
    return text


def trace(func):
    """Decorator to trace function calls via the OutputManager.

    Shows entry with arguments, then either the return value or the
    exception type, when the 'trace' channel threshold reaches TRACE.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_output

        out = get_output()
        if not out.enabled(TRACE, 'trace'):
            return func(*args, **kwargs)

        name = f"{func.__module__}.{func.__qualname__}"
        args_str = ', '.join(
            [_short_repr(a) for a in args]
            + [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
        )
        out.emit(TRACE, ">> {fn}({args})", channel='trace', fn=name, args=args_str)
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(TRACE, "!! {fn} raised: {exc}: {msg}", channel='trace',
                     fn=name, exc=type(e).__name__, msg=str(e))
            raise
        out.emit(TRACE, "<< {fn} returned: {val}", channel='trace',
                 fn=name, val=_short_repr(result))
        return result

    return wrapper
