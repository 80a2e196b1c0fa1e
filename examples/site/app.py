"""Site — static pages, default views, and dynamic segments.

Demonstrates explicit static handlers, static paths that fall back to a
view in ``views/``, ``{param}`` routes, and a handler that validates its
own parameter and raises NotFound.

Run with any ASGI server, for example:
    uvicorn app:app
"""

from pathlib import Path

from waypost import App, NotFound, RouterConfig

app = App(RouterConfig(views_dir=Path(__file__).parent / "views"))

# Default views: views/home.html, views/about.html, views/docs/intro.html
app.register("GET", "/")
app.register("GET", "/about")
app.register("GET", "/docs/intro")
app.register("GET", "/contact")  # no view on disk -> 404


@app.route("/hello")
def hello():
    return "Hello World! This is the hello page"


@app.route("/resources/{name}")
def resource(name: str):
    return f"Hello World! This is the {name} page"


# Dynamic patterns are tried in registration order, so the more specific
# one goes first.
@app.route("/blog/page/{pageNumber}")
def blog_page(page_number: str):
    if not page_number.isdigit() or not 1 <= int(page_number) <= 10:
        raise NotFound(f"No blog page {page_number}")
    return f"Blog page {page_number}"


@app.route("/blog/{category}/{slug}")
def blog_post(category: str, slug: str):
    return {"category": category, "slug": slug}


@app.route("/records", methods=["POST"])
def create_record():
    return "Created"
