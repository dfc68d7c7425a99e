from dishka import Provider as DishkaProvider

from aura.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all Aura providers.

    Anything provided without an explicit scope lives for one unit of work.
    """

    scope = Scope.UOW
