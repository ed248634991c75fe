"""Provider base class and swappable component names."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

Component = Literal["discord", "steam", "persistence"]
COMPONENTS: tuple[Component, ...] = get_args(Component)


class ProviderBase(Provider):
    """Base for every provider in the container.

    A swappable component has a base class naming it in
    ``__mock_component__``; its implementations set ``__is_mock__``.
    Providers without a component are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
