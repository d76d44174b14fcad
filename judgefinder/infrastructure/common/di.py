from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[], T]:
    """Create a FastAPI dependency for a container provider."""

    def dependency() -> T:
        return provider()

    return dependency
