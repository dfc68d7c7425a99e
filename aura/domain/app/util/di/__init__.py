from aura.domain.app.util.di.provider import AppProvider

__all__ = ["AppProvider"]
