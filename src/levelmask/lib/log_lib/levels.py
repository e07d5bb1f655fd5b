"""
THAC0 verbosity constants for levelmask's own diagnostic output.

These are NOT the severities a Level gates (see levelmask.scale) — they
are thresholds for the library talking about itself. The emit rule is:

    message.level <= threshold  →  message is shown

Level assignments:
    ←── quieter ────────── default ────────── louder ──→
    -4       -1      0       1        3
    nothing  quiet   default detail   trace
"""

# Positive levels (verbose output)
TRACE = 3          # Every applied modifier, @trace call entry/exit
DETAIL = 1         # Ignored input: unknown severities, skipped directives
DEFAULT = 0        # Default output (levelmask emits nothing here)

# Negative levels (quiet suppression)
QUIET = -1         # Opt-in channels sit here until enabled
NOTHING = -4       # Hard wall — nothing at all
