"""Allocation result models."""

from typing import List, Optional

from pydantic import Field

from .article import AllocatedArticle, ArticleLine, ParsedArticle
from .base import WireModel


class PersonAllocation(WireModel):
    """Articles claimed by one person, in claim order."""

    person: str = Field(..., description="Requester label")
    articles: List[ArticleLine] = Field(default_factory=list)


class FinalAllocationResult(WireModel):
    """Grouped allocation handed to the submission step."""

    person_allocations: List[PersonAllocation] = Field(default_factory=list)
    ddn_articles: List[ArticleLine] = Field(default_factory=list)
    unallocated_articles: List[ArticleLine] = Field(default_factory=list)


class DdnValidationResult(WireModel):
    """Outcome of validating the DDN textarea."""

    articles: List[str] = Field(default_factory=list)
    error: Optional[str] = Field(None, description="Error message, None when valid")

    @property
    def is_valid(self) -> bool:
        return self.error is None


class AllocationCheck(WireModel):
    """Pre-flight summary computed before distribution."""

    is_over_allocated: bool = False
    remaining_articles: int = 0
    allocated_article_count: int = 0
    ddn_validation_error: Optional[str] = None
    errors: List[str] = Field(default_factory=list)


class PreviewResult(WireModel):
    """Flat rows for the preview table."""

    allocated_articles: List[AllocatedArticle] = Field(default_factory=list)
    unallocated_articles: List[AllocatedArticle] = Field(default_factory=list)
    display_articles: List[AllocatedArticle] = Field(default_factory=list)


class FilteredArticlesResult(WireModel):
    """Articles left after removing ones allocated on earlier days."""

    parsed_articles: List[ParsedArticle] = Field(default_factory=list)
    filtered_out_count: int = 0
    filtered_out_articles: List[str] = Field(default_factory=list)


class AllocationItem(WireModel):
    """One spreadsheet row as the allocations webhook expects it."""

    month: str = Field(..., alias="Month")
    date: str = Field(..., alias="Date")
    article_number: str = Field(..., alias="Article number")
    pages: int = Field(..., alias="Pages")
    completed: str = Field("Not started", alias="Completed")
    done_by: str = Field(..., alias="Done by")
    time: str = Field("", alias="Time")
