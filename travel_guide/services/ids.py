"""Identifier generation, injectable so tests can use deterministic ids."""
from typing import Callable, Iterator, Optional
import itertools
import uuid

IdFactory = Callable[[], str]


def uuid_id_factory() -> str:
    return str(uuid.uuid4())


def sequential_id_factory(prefix: str = "id") -> IdFactory:
    """Factory returning '<prefix>-1', '<prefix>-2', ..."""
    counter: Iterator[int] = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


def resolve(id_factory: Optional[IdFactory]) -> IdFactory:
    return id_factory or uuid_id_factory
