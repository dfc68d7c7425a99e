from aura.domain.release.util.di.provider import ReleaseProvider

__all__ = ["ReleaseProvider"]
