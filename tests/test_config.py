"""Tests for waypost.config — RouterConfig defaults and immutability."""

from pathlib import Path

import pytest

from waypost.config import RouterConfig


class TestRouterConfig:
    def test_defaults(self) -> None:
        config = RouterConfig()
        assert config.views_dir == "views"
        assert config.view_suffix == ".html"
        assert config.home_view == "home"
        assert config.autoescape is True
        assert config.debug is False

    def test_override(self) -> None:
        config = RouterConfig(views_dir=Path("pages"), home_view="index")
        assert config.views_dir == Path("pages")
        assert config.home_view == "index"

    def test_frozen(self) -> None:
        config = RouterConfig()
        with pytest.raises(AttributeError):
            config.views_dir = "other"  # type: ignore[misc]
