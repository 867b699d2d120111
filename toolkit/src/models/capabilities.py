"""Capability protocols consumed by the toolkit services.

Services only touch items through these attributes, so host items and
test doubles are interchangeable.
"""
from typing import Optional, Protocol, runtime_checkable

from models.geometry import Point


@runtime_checkable
class Positioned(Protocol):
    """Top-left anchor plus relative movement"""

    @property
    def position(self) -> Point: ...

    def translate(self, dx: float, dy: float) -> None: ...


@runtime_checkable
class Fillable(Protocol):
    fill_color: object
    opacity: float


@runtime_checkable
class Lockable(Protocol):
    locked: bool

    @property
    def layer(self) -> Optional[object]: ...
