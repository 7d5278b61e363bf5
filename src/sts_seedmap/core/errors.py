"""Failure kinds raised by the random engine.

Both are programming errors at the call site, never transient conditions,
so the library raises them where they originate and never catches them.
"""


class InvalidArgumentError(ValueError):
    """A bounded draw was asked for an empty or out-of-range interval."""


class EmptyInputError(ValueError):
    """A choice was requested from an empty sequence."""
