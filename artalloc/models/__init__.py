"""Data models for the Article Allocator."""

from .allocation import (
    AllocationCheck,
    AllocationItem,
    DdnValidationResult,
    FilteredArticlesResult,
    FinalAllocationResult,
    PersonAllocation,
    PreviewResult,
)
from .article import (
    DDN_NAME,
    UNALLOCATED_NAME,
    AllocatedArticle,
    ArticleLine,
    ArticleOverride,
    ParsedArticle,
)
from .requester import PriorityField

__all__ = [
    "DDN_NAME",
    "UNALLOCATED_NAME",
    "AllocatedArticle",
    "AllocationCheck",
    "AllocationItem",
    "ArticleLine",
    "ArticleOverride",
    "DdnValidationResult",
    "FilteredArticlesResult",
    "FinalAllocationResult",
    "ParsedArticle",
    "PersonAllocation",
    "PreviewResult",
    "PriorityField",
]
