"""Catalog bootstrap (import side-effect)."""
from .api import set_catalog
from .bootstrap import build_catalog

set_catalog(build_catalog())
