"""
Tests for levelmask.lib.log_lib — THAC0 diagnostic output.

Tests the THAC0 axis, per-channel overrides, opt-in channels, channel
spec parsing, the @trace decorator, and what levelmask itself reports.
"""

import pytest

from levelmask import Level
from levelmask.lib.log_lib import (
    OutputManager,
    get_output,
    init_output,
    trace,
)
from levelmask.lib.log_lib.channels import (
    KNOWN_CHANNELS,
    OPT_IN_CHANNELS,
    ChannelConfig,
    parse_channel_spec,
)
from levelmask.lib.log_lib.levels import (
    DEFAULT, DETAIL, NOTHING, QUIET, TRACE,
)


# =============================================================================
# THAC0 Level Constants
# =============================================================================

class TestLevelConstants:
    """Verify THAC0 level constants."""

    def test_level_ordering(self):
        """NOTHING < QUIET < DEFAULT < DETAIL < TRACE."""
        assert NOTHING < QUIET < DEFAULT < DETAIL < TRACE

    def test_specific_values(self):
        assert DEFAULT == 0
        assert NOTHING == -4
        assert TRACE == 3


# =============================================================================
# Emit
# =============================================================================

class TestEmit:
    """Test OutputManager.emit() gating."""

    def test_shown_at_threshold(self, buf):
        out = OutputManager(verbosity=1, file=buf)
        out.emit(1, "visible {n}", n=1)
        assert buf.getvalue() == "[levelmask:general] visible 1\n"

    def test_hidden_above_threshold(self, buf):
        out = OutputManager(verbosity=0, file=buf)
        out.emit(1, "hidden")
        assert buf.getvalue() == ""

    def test_channel_override_shows(self, buf):
        out = OutputManager(verbosity=0, channel_overrides={'parse': 1}, file=buf)
        out.emit(1, "parse detail", channel='parse')
        assert "parse detail" in buf.getvalue()

    def test_channel_override_hides(self, buf):
        out = OutputManager(verbosity=3, channel_overrides={'parse': 0}, file=buf)
        out.emit(1, "hidden", channel='parse')
        assert buf.getvalue() == ""

    def test_hard_wall(self, buf):
        """Threshold -4 blocks every level."""
        out = OutputManager(verbosity=NOTHING, file=buf)
        out.emit(NOTHING, "blocked")
        assert buf.getvalue() == ""

    def test_quiet_hides_default(self, buf):
        out = OutputManager(verbosity=QUIET, file=buf)
        out.emit(DEFAULT, "hidden")
        assert buf.getvalue() == ""

    def test_braces_without_kwargs_kept(self, buf):
        """Messages without kwargs are not formatted."""
        out = OutputManager(file=buf)
        out.emit(0, "literal {braces}")
        assert "literal {braces}" in buf.getvalue()


class TestEnabled:
    """Test enabled()."""

    def test_default_channel_active(self):
        assert OutputManager().enabled(DEFAULT, 'general') is True

    def test_inactive_when_quiet(self):
        assert OutputManager(verbosity=QUIET).enabled(DEFAULT, 'general') is False

    def test_opt_in_inactive_by_default(self):
        assert init_output().enabled(DEFAULT, 'trace') is False

    def test_opt_in_enabled_by_spec(self):
        assert init_output(channels=['trace']).enabled(DEFAULT, 'trace') is True

    def test_enabled_respects_hard_wall(self):
        out = OutputManager(verbosity=0, channel_overrides={'parse': NOTHING})
        assert out.enabled(NOTHING, 'parse') is False


# =============================================================================
# Singleton
# =============================================================================

class TestSingleton:
    """Test init_output()/get_output()."""

    def test_get_output_creates_default(self):
        out = get_output()
        assert out.verbosity == DEFAULT
        assert get_output() is out

    def test_init_output_replaces(self):
        first = get_output()
        second = init_output(verbosity=2)
        assert get_output() is second is not first

    def test_channel_specs_become_overrides(self):
        out = init_output(channels=['modifier:3', 'parse:-1'])
        assert out.channel_overrides['modifier'] == 3
        assert out.channel_overrides['parse'] == -1

    def test_opt_in_defaults(self):
        assert init_output().channel_overrides['trace'] == QUIET

    def test_empty_spec_ignored(self):
        assert '' not in init_output(channels=['']).channel_overrides


# =============================================================================
# Channel specs
# =============================================================================

class TestParseChannelSpec:
    """Test parse_channel_spec()."""

    def test_name_only(self):
        assert parse_channel_spec("parse") == ChannelConfig("parse", 0)

    def test_name_and_level(self):
        assert parse_channel_spec("modifier:3") == ChannelConfig("modifier", 3)

    def test_negative_level(self):
        assert parse_channel_spec("config:-4").level == -4

    def test_empty_level(self):
        assert parse_channel_spec("parse:").level == 0

    def test_bad_level_is_zero(self):
        """A non-integer level falls back to 0 instead of raising."""
        assert parse_channel_spec("parse:loud") == ChannelConfig("parse", 0)

    def test_whitespace_stripped(self):
        assert parse_channel_spec(" parse:2 ").name == "parse"


class TestKnownChannels:
    """Test the channel registry."""

    def test_opt_in_subset_of_known(self):
        assert OPT_IN_CHANNELS <= KNOWN_CHANNELS


# =============================================================================
# Trace decorator
# =============================================================================

@trace
def _double(x):
    return x * 2


@trace
def _explode():
    raise RuntimeError("boom")


class TestTrace:
    """Test the @trace decorator."""

    def test_silent_by_default(self, capsys):
        assert _double(2) == 4
        assert capsys.readouterr().err == ""

    def test_entry_and_exit(self, loud, buf):
        assert _double(21) == 42
        text = buf.getvalue()
        assert ">> " in text and "_double(21)" in text
        assert "returned: 42" in text

    def test_exception_reported_and_reraised(self, loud, buf):
        with pytest.raises(RuntimeError):
            _explode()
        assert "raised: RuntimeError: boom" in buf.getvalue()

    def test_long_arguments_clipped(self, loud, buf):
        _double("x" * 200)
        assert "..." in buf.getvalue()

    def test_preserves_metadata(self):
        assert _double.__name__ == "_double"


# =============================================================================
# What levelmask reports
# =============================================================================

class TestLevelDiagnostics:
    """Ignored input is silent by default and visible when asked for."""

    def test_ignored_severity_silent_by_default(self, capsys):
        Level().gte('nope')
        assert capsys.readouterr().err == ""

    def test_ignored_severity_reported(self, buf):
        init_output(verbosity=DETAIL, file=buf)
        Level().gte('nope')
        assert "[levelmask:modifier] ignored gte('nope'): not on the scale" in buf.getvalue()

    def test_skipped_directive_reported(self, buf):
        init_output(verbosity=DETAIL, file=buf)
        Level('gte.info bogus')
        assert "skipped directive 'bogus'" in buf.getvalue()

    def test_ignored_spec_type_reported(self, buf):
        init_output(verbosity=DETAIL, file=buf)
        Level(1.5)
        assert "ignored level spec of type float" in buf.getvalue()

    def test_applied_modifier_traced(self, buf):
        init_output(channels=['modifier:3'], file=buf)
        Level().gte('warn')
        assert "[levelmask:modifier] gte.warn -> warn, error, fatal, unknown" in buf.getvalue()

    def test_emptied_mask_traced(self, buf):
        init_output(channels=['modifier:3'], file=buf)
        Level().lt('debug')
        assert "lt.debug -> (none)" in buf.getvalue()

    def test_query_is_silent(self, loud, buf):
        """enabled_at() never writes, even at TRACE."""
        level = Level('warn')
        buf.truncate(0)
        buf.seek(0)
        level.enabled_at('info')
        level.enabled_at('nope')
        assert buf.getvalue() == ""
