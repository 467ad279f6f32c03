"""Connectivity signal source port."""

from collections.abc import Awaitable, Callable
from typing import Protocol

ConnectivityListener = Callable[[bool], Awaitable[None]]


class ConnectivitySource(Protocol):
    """Port exposing the online/offline signal and its transitions."""

    def is_online(self) -> bool: ...

    def subscribe(self, listener: ConnectivityListener) -> None: ...

    def unsubscribe(self, listener: ConnectivityListener) -> None: ...
