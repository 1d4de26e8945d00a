"""
Pydantic schema definitions for the marketplace entities.

Each entity defines a ``*Create`` payload, an optional ``*Update``
patch (all fields optional) and the stored record itself.  Records are
frozen so that the storage is the only place where they change.
"""
