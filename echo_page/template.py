# -*- coding: utf-8 -*-
"""Page shell: navbar, CDN resources and the final HTML response."""

import html

from webob import Response

from .config import DEFAULT_BRAND
from .menu import Divider, Link, Menu, Submenu, dropdown_id

DOCTYPE = "<!DOCTYPE html>\r\n\r\n"


def escape(text) -> str:
    return html.escape(str(text), quote=True)


def attrs(*pairs) -> str:
    """Render (name, value) pairs as an escaped attribute string."""
    return "".join(f' {name}="{escape(value)}"' for name, value in pairs)


# -------- Resources --------
class Resource:
    def __init__(self, uri: str, integrity: str):
        self.uri = uri
        self.integrity = integrity

    def __repr__(self):
        return f"Resource({self.uri!r})"


# Stylesheet for the Darkly bootstrap theme from bootswatch.com
BOOTSTRAP_DARKLY = Resource(
    "https://bootswatch.com/4/darkly/bootstrap.min.css",
    "sha384-w+8Gqjk9Cuo6XH9HKHG5t5I1VR4YBNdPt/29vwgfZR485eoEJZ8rJRbm3TR32P6k",
)

JQUERY = Resource(
    "https://code.jquery.com/jquery-3.3.1.slim.min.js",
    "sha384-q8i/X+965DzO0rT7abK41JStQIAqVgRVzpbzo5smXKp4YfRvH+8abtTE1Pi6jizo",
)

POPPER = Resource(
    "https://cdnjs.cloudflare.com/ajax/libs/popper.js/1.14.7/umd/popper.min.js",
    "sha384-UO2eT0CpHqdSJQ6hJty5KVphtPhzWj9WO1clHTMGa3JDZwrnQq4sF86dIHNDz0W1",
)

BOOTSTRAP_JS = Resource(
    "https://stackpath.bootstrapcdn.com/bootstrap/4.3.1/js/bootstrap.min.js",
    "sha384-JjSmVgyd0p3pXB1rRibZUAYoIIy6OrQ6VrjIEaFf/nJGzIxFDsf4x0xIM+B07jRM",
)


class Stylesheet:
    def __init__(self, uri: str, integrity: str):
        self.uri = uri
        self.integrity = integrity

    @classmethod
    def from_resource(cls, resource: Resource):
        return cls(resource.uri, resource.integrity)

    def render(self) -> str:
        return "<link%s>" % attrs(
            ("rel", "stylesheet"),
            ("type", "text/css"),
            ("href", self.uri),
            ("integrity", self.integrity),
            ("crossorigin", "anonymous"),
        )


class Script:
    def __init__(self, uri: str, integrity: str):
        self.uri = uri
        self.integrity = integrity

    @classmethod
    def from_resource(cls, resource: Resource):
        return cls(resource.uri, resource.integrity)

    def render(self) -> str:
        return "<script%s></script>" % attrs(
            ("type", "application/javascript"),
            ("src", self.uri),
            ("integrity", self.integrity),
            ("crossorigin", "anonymous"),
        )


# -------- Navbar --------
def nav_dropdown_item(item) -> str:
    if isinstance(item, Link):
        return f'<a{attrs(("class", "dropdown-item"), ("href", item.location))}>{escape(item.name)}</a>'
    if isinstance(item, Divider):
        return '<div class="dropdown-divider"></div>'
    # bootstrap 4 has no nested dropdowns
    return ""


def nav_dropdown(name: str, menu: Menu) -> str:
    ident = dropdown_id(name)
    toggle = attrs(
        ("class", "nav-link dropdown-toggle"),
        ("href", "#"),
        ("id", ident),
        ("role", "button"),
        ("data-toggle", "dropdown"),
        ("aria-haspopup", "true"),
        ("aria-expanded", "false"),
    )
    items = "".join(nav_dropdown_item(item) for item in menu)
    return (
        '<li class="nav-item dropdown">'
        f"<a{toggle}>{escape(name)}</a>"
        f'<div{attrs(("class", "dropdown-menu"), ("aria-labelledby", ident))}>{items}</div>'
        "</li>"
    )


def nav_menu_item(item) -> str:
    if isinstance(item, Submenu):
        return nav_dropdown(item.name, item.menu)
    if isinstance(item, Link):
        link = attrs(("class", "nav-link"), ("href", item.location))
        return f'<li class="nav-item"><a{link}>{escape(item.name)}</a></li>'
    return ""


def nav_menu(menu: Menu) -> str:
    items = "".join(nav_menu_item(item) for item in menu)
    return f'<ul class="navbar-nav mr-auto">{items}</ul>'


def main_navbar(menu: Menu, brand: str = DEFAULT_BRAND) -> str:
    toggler = attrs(
        ("class", "navbar-toggler"),
        ("type", "button"),
        ("data-toggle", "collapse"),
        ("data-target", "#mainNavbarContent"),
        ("aria-controls", "mainNavbarContent"),
        ("aria-expanded", "false"),
        ("aria-label", "Toggle navigation"),
    )
    return (
        '<nav class="navbar navbar-expand-lg navbar-light bg-primary sticky-top">'
        f'<a class="navbar-brand" href="#">{escape(brand)}</a>'
        f'<button{toggler}><span class="navbar-toggler-icon"></span></button>'
        f'<div class="collapse navbar-collapse" id="mainNavbarContent">{nav_menu(menu)}</div>'
        "</nav>"
    )


# -------- Page --------
def default_menu() -> Menu:
    menu = Menu()
    menu.add_link("Test", "http://google.com")
    dropdown = menu.child_menu("Test dropdown")
    dropdown.add_link("First", "/basic/path")
    dropdown.add_divider()
    dropdown.add_link("Second", "/basic/path")
    return menu


def global_wrapper(title: str, content: str, menu=None, brand: str = DEFAULT_BRAND) -> str:
    """
    Wrap already-rendered content in the site shell.

    ``content`` is inserted as-is; everything else is escaped.
    """
    if menu is None:
        menu = default_menu()

    scripts = "".join(Script.from_resource(r).render() for r in (JQUERY, POPPER, BOOTSTRAP_JS))
    return (
        "<html>"
        "<head>"
        '<meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1, shrink-to-fit=no">'
        f"<title>{escape(title)}</title>"
        f"{Stylesheet.from_resource(BOOTSTRAP_DARKLY).render()}"
        "</head>"
        "<body>"
        f"{main_navbar(menu, brand)}"
        f"{content}"
        f"{scripts}"
        "</body>"
        "</html>"
    )


def render_page(document: str) -> Response:
    """Render a document as a final web page."""
    return Response(
        body=(DOCTYPE + document).encode("utf-8"),
        status=200,
        content_type="text/html",
        charset="UTF-8",
    )
