"""Catalog whose scan hits failures: a raising documentation method and a
submodule that cannot be imported."""
