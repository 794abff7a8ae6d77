"""Internal constants shared across the library."""

ENV_PREFIX = "PYATTRIBUTED_"

# ------------------------------------------------------------------
# Platform paragraph defaults
# ------------------------------------------------------------------

DEFAULT_TAB_STOP_SPACING = 28.0
DEFAULT_TAB_STOP_COUNT = 12


def default_tab_locations() -> tuple[float, ...]:
    """Return the locations of the platform's default left-aligned tab stops.

    Twelve stops, one every 28 points, starting at 28.
    """
    return tuple(DEFAULT_TAB_STOP_SPACING * index for index in range(1, DEFAULT_TAB_STOP_COUNT + 1))
