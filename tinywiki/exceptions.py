class PageNotFound(LookupError):
    """Raised when a page has no readable file in the storage directory."""

    def __init__(self, title: str, reason: str = ""):
        self.title = title
        self.reason = reason
        message = f"Page '{title}' not found"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
