"""Error types raised by the scan result model."""


class InvalidArgument(ValueError):
    """Raised when a caller passes a value the result model cannot accept.

    Covers unsupported protocol versions, cipher names the catalog does
    not know for a version, malformed key lengths or statuses, non
    certificate values, and unusable version filters. Validation always
    happens before any state changes.
    """
