"""Section grouping for lists of decoded objects.

Kept apart from the request pipeline: these helpers only reshape lists that
were already fetched, typically to feed a sectioned list view.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Type, TypeVar

from .models import Requestable

T = TypeVar("T")


def grouped(objects: Sequence[T]) -> List[List[T]]:
    """Single section holding every object."""
    return [list(objects)]


def group_by_section_key(
    objects: Sequence[T], key: Optional[Callable[[T], str]] = None
) -> List[List[T]]:
    """Split ``objects`` into sections sharing the same key.

    Sections appear in the order their key is first seen and keep the input
    order of their items. Without ``key``, each object's ``section_key()``
    is used.

    Examples:
        >>> group_by_section_key(["apple", "avocado", "banana"], key=lambda s: s[0])
        [['apple', 'avocado'], ['banana']]
    """
    key_fn = key or _section_key
    sections: Dict[str, List[T]] = {}
    for obj in objects:
        sections.setdefault(key_fn(obj), []).append(obj)
    return list(sections.values())


def section_titles(
    model: Type[Requestable], sections: Sequence[Sequence[Any]]
) -> List[str]:
    """Header title for each section as reported by ``model.title_for_index``."""
    return [model.title_for_index(index) for index in range(len(sections))]


def _section_key(obj) -> str:
    return obj.section_key()
