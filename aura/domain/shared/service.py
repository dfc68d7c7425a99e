from dataclasses import dataclass
from typing import dataclass_transform


@dataclass_transform()
class Service:
    """Base class for domain services.

    Subclasses become dataclasses whose fields are their collaborators, so the
    container can build them from type hints alone.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        dataclass(cls)
