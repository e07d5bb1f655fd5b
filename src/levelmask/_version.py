"""
Version information for levelmask.

This file is the canonical source for version numbers.
The __version__ string carries build metadata after the base version
(branch, build number, date, commit hash) when built from a branch.

Format: MAJOR.MINOR.PATCH[-PHASE][_BRANCH_BUILD-YYYYMMDD-COMMITHASH]
Example: 0.1.0-alpha_main_1-20261019-3e1f0a2
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "alpha"  # None, "alpha", "beta", "rc1", etc.

__version__ = "0.1.0-alpha_main_1-20261019-3e1f0a2"
__app_name__ = "levelmask"


def get_version():
    """Return the full version string including branch and build info."""
    return __version__


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """
    Return the PEP 440 version for pip/setuptools.

    - Main branch: 0.1.0-alpha_main_1-20261019-hash -> 0.1.0a0
    - Other branches: 0.1.0-alpha_dev_4-20261019-hash -> 0.1.0a0.dev4
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"

    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)

    parts = __version__.split("_")
    if len(parts) < 3 or parts[1] == "main":
        return base

    build_num = parts[2].split("-")[0]
    return f"{base}.dev{build_num if build_num.isdigit() else 0}"


VERSION = get_version()
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
