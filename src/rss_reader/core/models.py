"""Pydantic models returned by the feed and article tools."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FeedEntry(BaseModel):
    """A single item from an RSS/Atom feed."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default="Untitled", description="Entry title")
    link: str = Field(default="", description="Entry permalink")
    pub_date: str | None = Field(
        default=None, alias="pubDate", description="Publication date as given by the feed"
    )
    creator: str | None = Field(default=None, description="Author or dc:creator")
    summary: str | None = Field(default=None, description="Summary or content snippet")
    categories: list[str] | None = Field(default=None, description="Category terms")
    guid: str | None = Field(default=None, description="Entry GUID / Atom id")


class FeedInfo(BaseModel):
    """Feed-level metadata plus the selected entries."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default="Untitled Feed", description="Feed title")
    description: str | None = Field(default=None, description="Feed description")
    link: str = Field(description="Feed homepage, or the feed URL when absent")
    last_build_date: str | None = Field(
        default=None, alias="lastBuildDate", description="Last build/update date"
    )
    entries: list[FeedEntry] = Field(default_factory=list)


class ArticleContent(BaseModel):
    """Main content of a web page, converted to markdown."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = Field(description="Page title, never empty")
    content: str = Field(description="Article body as markdown")
    url: str = Field(description="Source URL the HTML was fetched from")
    extracted_at: datetime = Field(
        default_factory=_utcnow, alias="extractedAt", description="UTC extraction time"
    )
