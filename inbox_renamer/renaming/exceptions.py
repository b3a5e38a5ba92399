class FilesystemError(Exception):
    """Raised when moving a file or creating the review folder fails."""
