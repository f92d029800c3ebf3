"""Predicate builder capability."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import FilterCriteria
    from ..predicate import Predicate


class PredicateBuilder(ABC):
    """
    Turns a single :class:`FilterCriteria` into a :class:`Predicate`.

    The engine asks each registered builder, in order, whether it
    ``supports`` a criterion and uses the first one that does.
    Implementations only construct predicates; they never run queries.
    """

    @abstractmethod
    def build(self, criteria: FilterCriteria) -> Predicate:
        ...

    @abstractmethod
    def supports(self, criteria: FilterCriteria) -> bool:
        ...
