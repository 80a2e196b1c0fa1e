"""Kida environment setup for default views.

Creates a kida Environment from waypost's RouterConfig. ``App`` builds
it once, on the first default-view render, and reuses it afterwards.
"""

from kida import Environment, FileSystemLoader

from waypost.config import RouterConfig


def create_environment(config: RouterConfig) -> Environment:
    """Create a kida Environment rooted at ``config.views_dir``."""
    return Environment(
        loader=FileSystemLoader(str(config.views_dir)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )
