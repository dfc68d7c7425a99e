"""Custom Dishka scopes for Aura."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Aura dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: process lifetime (engine, Docker client)
    - UOW: one unit of work, i.e. one HTTP request with its own DB session
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
