from aura.infrastructure.oci.di import OciProvider

__all__ = ["OciProvider"]
