from global_explorer.ui.log_surface import LogSurface
from global_explorer.ui.surface import (
    BrowseSurface,
    CountryCard,
    CountryDetail,
    FeedbackSurface,
    PaginationState,
)

__all__ = [
    "BrowseSurface",
    "CountryCard",
    "CountryDetail",
    "FeedbackSurface",
    "LogSurface",
    "PaginationState",
]
