"""pathfilter: exclusion-pattern matching for file watchers and build triggers."""

__version__ = "0.1.0"


class PathFilterError(Exception):
    """User-facing CLI error.

    Raised for unreadable pattern files and invalid option
    combinations. The matching core never raises it: malformed
    patterns simply match nothing. The message is printed to
    stderr and the process exits with code 2.
    """
