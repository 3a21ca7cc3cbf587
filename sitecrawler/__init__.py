"""Crawl a website and build a site map of its same-host pages."""

__version__ = "1.0.0"