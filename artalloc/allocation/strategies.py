"""Pool ordering strategies for the two allocation methods."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from ..models import ParsedArticle


class AllocationMethod(str, Enum):
    """Allocation methods offered on the form."""

    BY_PAGES = "allocate by pages"
    BY_PRIORITY = "allocate by priority"


def normalize_method(method: Optional[str]) -> AllocationMethod:
    """Map a free-form method string to a method; unknown values mean priority."""
    if isinstance(method, AllocationMethod):
        return method
    if method and method.strip().lower() == AllocationMethod.BY_PAGES.value:
        return AllocationMethod.BY_PAGES
    return AllocationMethod.BY_PRIORITY


class AllocationStrategy(ABC):
    """Base class for pool ordering."""

    method: AllocationMethod

    @abstractmethod
    def order_pool(self, pool: List[ParsedArticle]) -> List[ParsedArticle]:
        """
        Return the order requesters walk the pool in.

        Args:
            pool: Non-DDN articles in input order

        Returns:
            New list; the input is left untouched
        """


class PriorityStrategy(AllocationStrategy):
    """First come, first served: the pool keeps its input order."""

    method = AllocationMethod.BY_PRIORITY

    def order_pool(self, pool: List[ParsedArticle]) -> List[ParsedArticle]:
        return list(pool)


class PagesStrategy(AllocationStrategy):
    """Largest articles first; ties keep their input order."""

    method = AllocationMethod.BY_PAGES

    def order_pool(self, pool: List[ParsedArticle]) -> List[ParsedArticle]:
        return sorted(pool, key=lambda article: article.pages, reverse=True)


_STRATEGIES = {
    AllocationMethod.BY_PAGES: PagesStrategy(),
    AllocationMethod.BY_PRIORITY: PriorityStrategy(),
}


def get_strategy(method: Optional[str]) -> AllocationStrategy:
    """Strategy for a method string."""
    return _STRATEGIES[normalize_method(method)]
