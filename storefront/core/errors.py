# storefront/core/errors.py
"""
Error taxonomy for the storefront core.

Services raise these and never swallow them; the handlers registered in
storefront/main.py turn them into HTTP responses.
"""


class StorefrontError(Exception):
    """Base class for storefront errors."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(StorefrontError):
    """Referenced SKU or order id does not exist."""

    status_code = 404


class ValidationFailure(StorefrontError):
    """Malformed request input (e.g. a non-integer quantity)."""

    status_code = 400


class StoreFailure(StorefrontError):
    """
    The underlying persistence operation failed.

    The triggering operation's side effects have been rolled back.
    """

    status_code = 500
