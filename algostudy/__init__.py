"""Classic stack, string, array and binary tree algorithms, AVL and ternary search trees."""

__version__ = "0.1.0"