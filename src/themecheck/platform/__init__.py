"""Infrastructure adapters: logging, option storage, and the theme check service."""
