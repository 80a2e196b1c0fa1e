"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(views_dir="pages", view_suffix=".kida")
    """

    # Default views
    views_dir: str | Path = "views"
    view_suffix: str = ".html"
    home_view: str = "home"

    # Templates
    autoescape: bool = True
    debug: bool = False  # auto-reload views on change
