from __future__ import annotations


class FrozenValue:
    """
    Base for immutable value types.

    Subclasses declare their fields in ``__slots__``, assign them in
    ``__init__`` and finish with ``self._freeze()``. Any assignment after that
    raises ``AttributeError``; "mutation" means building a new instance.
    """
    __slots__ = ('_is_frozen',)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)
