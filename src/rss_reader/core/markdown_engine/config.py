"""Configuration model for the article extraction and markdown pipeline."""

from pydantic import BaseModel, Field


class MarkdownEngineConfig(BaseModel):
    """Configuration for locating, pruning and rendering article content."""

    parser: str = Field(
        default="html.parser", description="BeautifulSoup tree builder"
    )
    content_selectors: list[str] = Field(
        default_factory=lambda: [
            "article",
            '[role="main"]',
            ".content",
            ".post-content",
            ".entry-content",
            ".article-content",
            "main",
            ".container",
        ],
        description="CSS selectors tried in priority order for the article body",
    )
    noise_selectors: list[str] = Field(
        default_factory=lambda: [
            "script",
            "style",
            "nav",
            "header",
            "footer",
            ".sidebar",
            ".navigation",
            ".menu",
            ".ads",
            ".advertisement",
            ".social-share",
            ".comments",
            ".related-posts",
            ".author-bio",
        ],
        description="CSS selectors removed from the selected content",
    )
    paragraph_tag: str = Field(
        default="p", description="Tag counted by the density fallback"
    )
    heading_style: str = Field(
        default="atx", description="markdownify heading style"
    )
    bullets: str = Field(
        default="-", description="Marker used for unordered list items"
    )
    untitled_placeholder: str = Field(
        default="Untitled Article",
        description="Title used when neither <title> nor <h1> has text",
    )
