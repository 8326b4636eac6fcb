"""themecheck: report how much a pending theme update changes a site."""

__version__ = "1.0.0"
