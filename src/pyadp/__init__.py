"""Fantasy football ADP feed: scrape, cache and serve draft rankings."""

__version__ = "0.1.0"
