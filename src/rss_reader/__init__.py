"""rss-reader-mcp: RSS feed reading and article extraction as MCP tools."""

__version__ = "1.0.0"
