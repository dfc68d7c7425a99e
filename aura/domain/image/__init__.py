from aura.domain.image.model.reference import ImageReference

__all__ = ["ImageReference"]
