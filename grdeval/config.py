"""Configuration constants and environment overrides."""

import os

# Rank depth evaluated when -k is not given.
_DEFAULT_CUTOFF = 20

# 2**grade must stay exact in a float; real qrels use 0-4.
MAX_GRADE = 30

REPORT_DECIMALS = 5
MEAN_ROW_LABEL = "amean"

QREL_FIELDS = 4
RUN_FIELDS = 6


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def get_default_cutoff() -> int:
    """Return default cutoff (GRDEVAL_CUTOFF env override, else 20)."""
    value = _env_int("GRDEVAL_CUTOFF")
    if value is None or value < 0:
        return _DEFAULT_CUTOFF
    return value
