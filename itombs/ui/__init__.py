"""UI module for NiceGUI interface."""

from itombs.ui.tree_page import FamilyTreePage

__all__ = ["FamilyTreePage"]
