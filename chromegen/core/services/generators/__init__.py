"""
Generators — turn a registry snapshot into extension files.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile`` (path relative to the output directory). They are
pure: same snapshot in, same bytes out.
"""
