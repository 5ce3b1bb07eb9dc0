from __future__ import annotations

from dataclasses import dataclass

from ._format import value_repr


@dataclass(slots=True)
class Config:
    """Process-wide display settings.

    Only the textual representation of containers is affected; their behavior never depends on it.

    Attributes:
        max_repr_length (int): Maximum length of the payload shown in `Some`, `Success` and `Failure` reprs.
        repr_depth (int): Nesting depth shown for container payloads.
    """

    max_repr_length: int = 80
    repr_depth: int = 3

    def value_repr(self, v: object) -> str:
        return value_repr(v, max_length=self.max_repr_length, depth=self.repr_depth)


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance.

    Example:
    ```python
    >>> from pyotry import Some, get_config
    >>> cfg = get_config()
    >>> cfg.max_repr_length = 5
    >>> Some("a long string")
    Some(value='a ...g')
    >>> cfg.max_repr_length = 80

    ```
    """
    return _CONFIG
