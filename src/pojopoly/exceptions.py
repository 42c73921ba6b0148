"""Exceptions raised by pojopoly.

All of them are raised synchronously to the immediate caller; the library never retries or swallows them.
"""


class PojopolyError(Exception):
    """Generic marker for pojopoly-specific exceptions."""


class CapabilityNotRegisteredError(PojopolyError, LookupError):
    """Raised when resolving a capability which has never had an implementation registered.

    This usually means the module which registers the implementations has not been imported yet.
    """


class ImplementationNotFoundError(PojopolyError, LookupError):
    """Raised when a capability is known, but nothing is registered for the record's subtype id.

    This covers both a forgotten registration and a genuinely unsupported variant; the two cannot be told apart.
    A record which does not carry the subtyping key at all also ends up here.
    """


class InvalidImplementationError(PojopolyError, TypeError):
    """Raised at registration time when an implementation does not declare a usable `subtype_id`.

    This is a programming error. You will probably want the program to stop instead of recovering.
    """
