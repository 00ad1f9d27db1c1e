"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class CountryLookupError(ServiceError):
    """A lookup whose failure must be shown to the user."""

    notice_key = "lookup_failed"


class InvalidCode(CountryLookupError):
    notice_key = "invalid_code"


class CapitalNotFound(CountryLookupError):
    notice_key = "capital_not_found"


class RegionNotFound(CountryLookupError):
    notice_key = "region_not_found"


class FeedbackError(ServiceError):
    notice_key = "feedback_invalid"


class InvalidRating(FeedbackError):
    notice_key = "invalid_rating"


class MissingRating(FeedbackError):
    notice_key = "missing_rating"


class MissingComment(FeedbackError):
    notice_key = "missing_comment"


class FeedbackSubmitError(ServiceError):
    """Transmission of a feedback entry failed; carried, not raised, by the client."""
