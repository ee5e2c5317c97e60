"""Identifier generation for audit records and domain events."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 identifier (URL-safe, collision-resistant).

    Audit record ids and domain event ids are both drawn from here, so ids
    never depend on the backing store.
    """
    value = _next_cuid()
    if not isinstance(value, str):
        raise TypeError(f"CUID generator returned {type(value).__name__}, not str")
    return value
