from .round import Round, RoundState, DEFAULT_TIME_LIMIT, format_timer
from .display import PlateDisplay, decorate_plate, US_STATES, COLOR_COMBINATIONS, DEFAULT_MOTTO

__all__ = [
    "Round",
    "RoundState",
    "DEFAULT_TIME_LIMIT",
    "format_timer",
    "PlateDisplay",
    "decorate_plate",
    "US_STATES",
    "COLOR_COMBINATIONS",
    "DEFAULT_MOTTO",
]
