"""Tests for waypost.routing.router — registration and dispatch."""

import logging

import pytest

from waypost.errors import ConfigurationError, NotFound
from waypost.routing.route import DynamicRoute, StaticRoute
from waypost.routing.router import Router, normalize_request_path


class _Views:
    """In-memory view resolver that records lookups."""

    def __init__(self, views: dict[str, str]) -> None:
        self.views = views
        self.calls: list[str] = []

    def resolve(self, identifier: str) -> str | None:
        self.calls.append(identifier)
        return self.views.get(identifier or "home")


class TestNormalizeRequestPath:
    def test_strips_trailing_slash(self) -> None:
        assert normalize_request_path("/users/") == "/users"

    def test_lowercases(self) -> None:
        assert normalize_request_path("/Users/ALICE") == "/users/alice"

    def test_root_becomes_empty(self) -> None:
        assert normalize_request_path("/") == ""

    def test_drops_query_and_fragment(self) -> None:
        assert normalize_request_path("/search/?q=Hi#top") == "/search"


class TestRegister:
    def test_static_with_handler(self) -> None:
        r = Router()
        r.register("GET", "/about", lambda: "about")

        [(method, entry)] = r.routes
        assert method == "GET"
        assert isinstance(entry, StaticRoute)
        assert entry.path == "/about"
        assert entry.is_default is False

    def test_trailing_slash_stripped(self) -> None:
        r = Router()
        r.register("GET", "/about/", lambda: "about")

        assert r.routes[0][1].path == "/about"

    def test_root_stored_as_empty_key(self) -> None:
        r = Router()
        r.register("GET", "/")

        entry = r.routes[0][1]
        assert isinstance(entry, StaticRoute)
        assert entry.path == ""
        assert entry.is_default is True

    def test_dynamic_with_handler(self) -> None:
        r = Router()
        r.register("GET", "/records/{id}", lambda id: id)

        entry = r.routes[0][1]
        assert isinstance(entry, DynamicRoute)
        assert entry.pattern == "/records/{id}"
        assert entry.segments == ("", "records", "{id}")
        assert entry.param_names == ("id",)

    def test_empty_braces_count_as_dynamic(self) -> None:
        r = Router()
        r.register("GET", "/foo/{}", lambda value: value)

        assert isinstance(r.routes[0][1], DynamicRoute)

    def test_reversed_braces_are_static(self) -> None:
        r = Router()
        r.register("GET", "/foo/}{", lambda: "odd")

        assert isinstance(r.routes[0][1], StaticRoute)

    def test_dynamic_without_handler_rejected(self) -> None:
        r = Router()
        with pytest.raises(ConfigurationError, match="needs a handler"):
            r.register("GET", "/records/{id}")
        assert r.routes == []

    def test_empty_method_rejected(self) -> None:
        r = Router()
        with pytest.raises(ConfigurationError, match="method cannot be empty"):
            r.register("", "/", lambda: "ok")
        with pytest.raises(ConfigurationError):
            r.register("   ", "/", lambda: "ok")

    def test_last_write_wins(self) -> None:
        r = Router()
        r.register("GET", "/about", lambda: "first")
        r.register("GET", "/about", lambda: "second")

        assert len(r.routes) == 1
        assert r.dispatch("GET", "/about") == "second"

    def test_uppercase_path_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        r = Router()
        with caplog.at_level(logging.WARNING, logger="waypost.routing"):
            r.register("GET", "/About", lambda: "about")
        assert "uppercase" in caplog.text

    def test_register_after_dispatch_raises(self) -> None:
        r = Router()
        r.register("GET", "/", lambda: "home")
        r.dispatch("GET", "/")

        assert r.frozen is True
        with pytest.raises(RuntimeError, match="after dispatch"):
            r.register("GET", "/late", lambda: "late")

    def test_routes_in_registration_order(self) -> None:
        r = Router()
        r.register("GET", "/a", lambda: "a")
        r.register("POST", "/b", lambda: "b")
        r.register("GET", "/c/{x}", lambda x: x)

        keys = [
            (m, e.path if isinstance(e, StaticRoute) else e.pattern) for m, e in r.routes
        ]
        assert keys == [("GET", "/a"), ("GET", "/c/{x}"), ("POST", "/b")]


class TestStaticDispatch:
    def test_exact_path(self) -> None:
        calls: list[str] = []
        r = Router()
        r.register("GET", "/about", lambda: calls.append("about") or "about page")

        assert r.dispatch("GET", "/about") == "about page"
        assert calls == ["about"]

    @pytest.mark.parametrize("uri", ["/about", "/about/", "/ABOUT", "/About/"])
    def test_trailing_slash_and_case_ignored(self, uri: str) -> None:
        calls: list[str] = []
        r = Router()
        r.register("GET", "/about", lambda: calls.append(uri))

        r.dispatch("GET", uri)
        assert calls == [uri]

    def test_root(self) -> None:
        r = Router()
        r.register("GET", "/", lambda: "home")

        assert r.dispatch("GET", "/") == "home"
        assert r.dispatch("GET", "") == "home"

    def test_query_string_ignored(self) -> None:
        r = Router()
        r.register("GET", "/search", lambda: "results")

        assert r.dispatch("GET", "/search?q=python") == "results"

    def test_method_is_part_of_key(self) -> None:
        r = Router()
        r.register("GET", "/items", lambda: "list")
        r.register("POST", "/items", lambda: "create")

        assert r.dispatch("GET", "/items") == "list"
        assert r.dispatch("POST", "/items") == "create"

    def test_method_is_case_sensitive(self) -> None:
        r = Router()
        r.register("GET", "/items", lambda: "list")

        with pytest.raises(NotFound):
            r.dispatch("get", "/items")

    def test_handler_exceptions_propagate(self) -> None:
        def broken() -> str:
            raise ValueError("boom")

        r = Router()
        r.register("GET", "/broken", broken)

        with pytest.raises(ValueError, match="boom"):
            r.dispatch("GET", "/broken")


class TestDynamicDispatch:
    def test_single_param(self) -> None:
        received: list[tuple[str, ...]] = []
        r = Router()
        r.register("GET", "/records/{id}", lambda id: received.append((id,)))

        r.dispatch("GET", "/records/42")
        assert received == [("42",)]

    def test_params_in_pattern_order(self) -> None:
        r = Router()
        r.register("GET", "/blog/{category}/{slug}", lambda category, slug: (category, slug))

        assert r.dispatch("GET", "/blog/python/routing-basics") == ("python", "routing-basics")

    def test_param_value_is_lowercased(self) -> None:
        r = Router()
        r.register("GET", "/users/{name}", lambda name: name)

        assert r.dispatch("GET", "/users/Alice") == "alice"

    def test_segment_count_must_match(self) -> None:
        r = Router()
        r.register("GET", "/records/{id}", lambda id: id)

        with pytest.raises(NotFound):
            r.dispatch("GET", "/records/42/edit")
        with pytest.raises(NotFound):
            r.dispatch("GET", "/records")

    def test_literal_segments_must_match(self) -> None:
        r = Router()
        r.register("GET", "/records/{id}/edit", lambda id: id)

        with pytest.raises(NotFound):
            r.dispatch("GET", "/records/42/view")

    def test_uppercase_literal_never_matches(self) -> None:
        r = Router()
        r.register("GET", "/Records/{id}", lambda id: id)

        with pytest.raises(NotFound):
            r.dispatch("GET", "/Records/42")

    def test_first_registered_pattern_wins(self) -> None:
        r = Router()
        r.register("GET", "/items/{id}", lambda id: f"first:{id}")
        r.register("GET", "/items/{slug}", lambda slug: f"second:{slug}")

        assert r.dispatch("GET", "/items/7") == "first:7"

    def test_empty_segment_matches_param(self) -> None:
        r = Router()
        r.register("GET", "/a/{x}/b", lambda x: f"[{x}]")

        assert r.dispatch("GET", "/a//b") == "[]"

    def test_params_are_sanitized(self) -> None:
        r = Router()
        r.register("GET", "/echo/{text}", lambda text: text)

        value = r.dispatch("GET", "/echo/<script>alert('x')")
        assert "<" not in value
        assert ">" not in value
        assert "'" not in value
        assert "&lt;script&gt;" in value

    def test_only_one_handler_invoked(self) -> None:
        calls: list[str] = []
        r = Router()
        r.register("GET", "/x/{a}", lambda a: calls.append("first"))
        r.register("GET", "/x/{b}", lambda b: calls.append("second"))

        r.dispatch("GET", "/x/1")
        assert calls == ["first"]

    def test_range_checking_handler(self) -> None:
        def page(page_number: str) -> str:
            if int(page_number) > 10:
                raise NotFound(f"No page {page_number}")
            return f"Page {page_number}"

        r = Router()
        r.register("GET", "/blog/page/{pageNumber}", page)

        assert r.dispatch("GET", "/blog/page/5") == "Page 5"
        with pytest.raises(NotFound):
            r.dispatch("GET", "/blog/page/11")


class TestStaticBeforeDynamic:
    def test_static_wins_over_dynamic(self) -> None:
        r = Router()
        r.register("GET", "/users/me", lambda: "static")
        r.register("GET", "/users/{id}", lambda id: f"dynamic:{id}")

        assert r.dispatch("GET", "/users/me") == "static"
        assert r.dispatch("GET", "/users/7") == "dynamic:7"

    def test_static_registered_after_dynamic_still_wins(self) -> None:
        r = Router()
        r.register("GET", "/users/{id}", lambda id: f"dynamic:{id}")
        r.register("GET", "/users/me", lambda: "static")

        assert r.dispatch("GET", "/users/me") == "static"

    def test_pattern_text_is_not_a_static_key(self) -> None:
        r = Router()
        r.register("GET", "/records/{id}", lambda id: f"dynamic:{id}")

        assert r.dispatch("GET", "/records/{id}") == "dynamic:{id}"


class TestNotFound:
    def test_unknown_method(self) -> None:
        r = Router()
        with pytest.raises(NotFound) as exc_info:
            r.dispatch("DELETE", "/unknown")
        assert exc_info.value.status == 404
        assert "DELETE" in exc_info.value.detail
        assert "/unknown" in exc_info.value.detail

    def test_unknown_path(self) -> None:
        called: list[bool] = []
        r = Router()
        r.register("GET", "/known", lambda: called.append(True))

        with pytest.raises(NotFound):
            r.dispatch("GET", "/unknown")
        assert called == []


class TestDefaultViews:
    def test_root_renders_home(self) -> None:
        views = _Views({"home": "<h1>Home</h1>"})
        r = Router(views=views)
        r.register("GET", "/")

        assert r.dispatch("GET", "/") == "<h1>Home</h1>"
        assert views.calls == [""]

    def test_path_passed_to_resolver(self) -> None:
        views = _Views({"/about": "<p>About</p>"})
        r = Router(views=views)
        r.register("GET", "/about/")

        assert r.dispatch("GET", "/About") == "<p>About</p>"
        assert views.calls == ["/about"]

    def test_missing_view_is_not_found(self) -> None:
        r = Router(views=_Views({}))
        r.register("GET", "/missing")

        with pytest.raises(NotFound, match="No view"):
            r.dispatch("GET", "/missing")

    def test_no_resolver_is_not_found(self) -> None:
        r = Router()
        r.register("GET", "/")

        with pytest.raises(NotFound):
            r.dispatch("GET", "/")
