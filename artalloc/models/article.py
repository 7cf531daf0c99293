"""Article models."""

from typing import Optional

from pydantic import Field, field_validator

from .base import WireModel

DDN_NAME = "DDN"
UNALLOCATED_NAME = "NEED TO ALLOCATE"


class ParsedArticle(WireModel):
    """Article identifier with its page count."""

    article_id: str = Field(..., description="Upper-cased article identifier")
    pages: int = Field(0, description="Page count", ge=0)

    @field_validator("article_id")
    @classmethod
    def normalize_article_id(cls, v: str) -> str:
        """Ids are compared upper-cased everywhere downstream."""
        return v.strip().upper()


class ArticleLine(WireModel):
    """Article row stamped with month/date, without an owner."""

    article_id: str = Field(..., description="Article identifier")
    pages: int = Field(0, description="Page count", ge=0)
    month: str = Field(..., description="Month name, e.g. December")
    date: str = Field(..., description="Date in DD/MM/YYYY format")


class AllocatedArticle(ArticleLine):
    """Article row assigned to a person, DDN or left unallocated."""

    name: str = Field(..., description="Requester label, DDN or NEED TO ALLOCATE")

    def to_line(self) -> ArticleLine:
        """Drop the owner name."""
        return ArticleLine(
            article_id=self.article_id,
            pages=self.pages,
            month=self.month,
            date=self.date,
        )


class ArticleOverride(WireModel):
    """Hand edits made to a single row of the preview table."""

    name: Optional[str] = Field(None, description="Replacement owner name")
    pages: Optional[int] = Field(None, description="Replacement page count", ge=0)
    month: Optional[str] = Field(None, description="Replacement month")
    date: Optional[str] = Field(None, description="Replacement date")
