class OcrError(Exception):
    """Raised when text recognition on a rendered page fails."""
