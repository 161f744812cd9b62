class WatchTrackingError(Exception):
    """Raised when the watch-tracking service cannot be reached or returns an unusable payload."""

    def __init__(self, endpoint: str, reason: str):
        super().__init__(f"{endpoint}: {reason}")
        self.endpoint = endpoint
        self.reason = reason
