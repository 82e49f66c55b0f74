"""Animal shelter records kept in a name-ordered AVL tree, with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["avltree", "app"]