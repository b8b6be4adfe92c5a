"""Error taxonomy shared by all modules.

Each module raises its own concrete exceptions, but every one of them
derives from exactly one category below.  The API layer translates a
category into an HTTP status code; it never needs to know the concrete
class.

- ``InvalidRequest``: malformed or missing caller input.
- ``NotFound``: a referenced entity is absent.
- ``Conflict``: an invariant would be violated (e.g. duplicate order).
- ``PreconditionFailed``: a guard condition is not met.
- ``NotificationFailure``: delivery to the customer failed.
- ``InternalFailure``: storage or infrastructure fault.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for every error a service may raise."""


class InvalidRequest(DomainError):
    """Caller input is malformed or incomplete."""


class NotFound(DomainError):
    """A referenced entity does not exist."""


class Conflict(DomainError):
    """The operation would break a uniqueness invariant."""


class PreconditionFailed(DomainError):
    """A guard condition for the operation is not met."""


class NotificationFailure(DomainError):
    """The customer could not be notified; no data was changed."""


class InternalFailure(DomainError):
    """Storage or infrastructure fault.  Message is safe to log, not to show."""
