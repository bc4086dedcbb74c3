import unittest

from echo_page.menu import Divider, Link, Menu, Submenu, dropdown_id


class TestMenu(unittest.TestCase):
    def setUp(self):
        self.menu = Menu()

    def test_items_keep_insertion_order(self):
        self.menu.add_link("Home", "/")
        self.menu.add_divider()
        self.menu.add_link("About", "/about")
        self.assertEqual(list(self.menu), [Link("Home", "/"), Divider(), Link("About", "/about")])
        self.assertEqual(len(self.menu), 3)

    def test_child_menu_is_filled_in_place(self):
        child = self.menu.child_menu("More")
        child.add_link("First", "/first")

        submenu = self.menu.items[0]
        self.assertIsInstance(submenu, Submenu)
        self.assertEqual(submenu.name, "More")
        self.assertIs(submenu.menu, child)
        self.assertEqual(list(submenu.menu), [Link("First", "/first")])

    def test_new_child_menu_is_empty(self):
        self.assertEqual(len(self.menu.child_menu("Empty")), 0)

    def test_nested_trees_compare_equal(self):
        self.menu.add_link("Home", "/")
        child = self.menu.child_menu("More")
        child.add_link("First", "/first")
        child.add_divider()

        expected = Submenu("More")
        expected.menu.add_link("First", "/first")
        expected.menu.add_divider()
        self.assertEqual(list(self.menu), [Link("Home", "/"), expected])

        expected.menu.add_divider()
        self.assertNotEqual(list(self.menu), [Link("Home", "/"), expected])

    def test_links_and_dividers_are_hashable(self):
        self.assertEqual(len({Link("a", "/"), Link("a", "/"), Divider(), Divider()}), 2)


class TestDropdownId(unittest.TestCase):
    def test_keeps_lowercased_alphanumerics(self):
        self.assertEqual(dropdown_id("Test dropdown"), "testdropdown")
        self.assertEqual(dropdown_id("My-Menu #2!"), "mymenu2")

    def test_empty_name(self):
        self.assertEqual(dropdown_id(""), "")


if __name__ == '__main__':
    unittest.main()
