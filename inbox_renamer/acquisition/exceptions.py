class AcquisitionError(Exception):
    """Raised when a document is unreadable or no text can be produced from it."""
