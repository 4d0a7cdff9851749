"""Public weaving API.

Example:
    @method_decorator(lambda inner: lambda args: inner(args) * 2)
    class Double(Annotation):
        pass

    @weave
    class Calc:
        @Double()
        def add(self, a, b):
            return a + b

    Calc().add(2, 3)  # 10
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, TypeVar, overload

from decorum.domain.model.configuration import WeaverConfig
from decorum.infrastructure.weaver import ClassWeaver

if TYPE_CHECKING:
    from collections.abc import Callable

    from decorum.domain.model.annotation import Annotation
    from decorum.domain.model.slot import Slot

C = TypeVar("C", bound=type)

_default_weaver: ClassWeaver | None = None


def default_weaver() -> ClassWeaver:
    """Process-wide weaver, configured from the environment on first use."""
    global _default_weaver
    if _default_weaver is None:
        _default_weaver = ClassWeaver(config=WeaverConfig.from_env())
    return _default_weaver


@overload
def weave(cls: C, *, weaver: ClassWeaver | None = None) -> C: ...


@overload
def weave(cls: None = None, *, weaver: ClassWeaver | None = None) -> Callable[[C], C]: ...


def weave(
    cls: C | None = None,
    *,
    weaver: ClassWeaver | None = None,
) -> C | Callable[[C], C]:
    """Class decorator weaving annotated methods.

    Usable bare (@weave) or with a weaver (@weave(weaver=my_weaver)).
    Calling it again on a woven class applies annotations added since.
    """

    def apply(target: C) -> C:
        return (weaver or default_weaver()).weave(target)

    if cls is None:
        return apply
    return apply(cls)


def annotate(
    cls: type,
    name: str,
    *annotations: Annotation,
    weaver: ClassWeaver | None = None,
) -> None:
    """Attach annotations to an existing method; weave(cls) applies them."""
    (weaver or default_weaver()).annotate(cls, name, *annotations)


def slot_of(cls: type, name: str) -> Slot | None:
    """Slot behind a woven method, None if the method is not woven."""
    return default_weaver().slot_of(cls, name)


class Decorated:
    """Base class that weaves every subclass when it is defined.

    A subclass may pick its weaver: class Service(Decorated, weaver=w).
    The choice is inherited by further subclasses.
    """

    __decorum_weaver__: ClassVar[ClassWeaver | None] = None

    def __init_subclass__(cls, *, weaver: ClassWeaver | None = None, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if weaver is not None:
            cls.__decorum_weaver__ = weaver
        (cls.__decorum_weaver__ or default_weaver()).weave(cls)
