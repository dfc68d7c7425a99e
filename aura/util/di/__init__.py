from aura.util.di.base import Provider
from aura.util.di.scope import Scope

__all__ = ["Provider", "Scope"]
