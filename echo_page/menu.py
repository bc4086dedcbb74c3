# -*- coding: utf-8 -*-
"""Navigation tree rendered into the page navbar."""


class Link:
    def __init__(self, name: str, location: str):
        self.name = name
        self.location = location

    def __eq__(self, other):
        return isinstance(other, Link) and (self.name, self.location) == (other.name, other.location)

    def __hash__(self):
        return hash((self.name, self.location))

    def __repr__(self):
        return f"Link({self.name!r}, {self.location!r})"


class Divider:
    def __eq__(self, other):
        return isinstance(other, Divider)

    def __hash__(self):
        return hash(Divider)

    def __repr__(self):
        return "Divider()"


class Submenu:
    def __init__(self, name: str, menu=None):
        self.name = name
        self.menu = menu if menu is not None else Menu()

    def __eq__(self, other):
        return isinstance(other, Submenu) and self.name == other.name and list(self.menu) == list(other.menu)

    def __repr__(self):
        return f"Submenu({self.name!r}, {self.menu!r})"


class Menu:
    """Ordered list of links, dividers and submenus."""

    def __init__(self):
        self.items = []

    def add_link(self, name: str, location: str):
        self.items.append(Link(name, location))

    def add_divider(self):
        self.items.append(Divider())

    def child_menu(self, name: str) -> "Menu":
        """Append a submenu and return its (empty) menu for filling in place."""
        submenu = Submenu(name)
        self.items.append(submenu)
        return submenu.menu

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __repr__(self):
        return f"Menu({self.items!r})"


def dropdown_id(name: str) -> str:
    return "".join(c.lower() for c in name if c.isalnum())
