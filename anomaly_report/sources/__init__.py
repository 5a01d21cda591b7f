# ==============================================
# FIXTURE SOURCES
# ==============================================
#
# This package provides the three input sources and joins them
# into subject records before classification.
#
# Modules:
# --------
# - fixtures.py → Built-in rows + FixtureSources container
# - loader.py   → Load the three sources from JSON files
# - joiner.py   → Inner join on subject identifier
#
# ==============================================

from .fixtures import FixtureSources, builtin_sources
from .loader import load_sources
from .joiner import join_sources

__all__ = ["FixtureSources", "builtin_sources", "load_sources", "join_sources"]
