"""
Error taxonomy for data-access operations

Services catch these and surface the message on their state; routes map
error_type to an HTTP status.
"""


class BlogError(Exception):
    """Base error for blog data-access failures"""

    error_type = 'store_failure'
    default_message = 'Store request failed'

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class UnauthenticatedError(BlogError):
    """Action requires a signed-in actor"""

    error_type = 'unauthenticated'
    default_message = 'Not authenticated'


class UnauthorizedError(BlogError):
    """Actor does not own the target resource"""

    error_type = 'unauthorized'
    default_message = 'Unauthorized'


class StoreError(BlogError):
    """Underlying fetch or mutation was rejected"""

    error_type = 'store_failure'
