# topmark:header:start
#
#   project      : NvimGen
#   file         : __init__.py
#   file_relpath : src/nvimgen/catalog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option catalog and presets.

The catalog is the static list of options NvimGen knows how to emit. It decides
each option's declared type (which drives encoding) and category (which drives
ordering). Presets bundle ready-made selections built on top of the catalog.
"""

from __future__ import annotations

from nvimgen.catalog.base import Catalog
from nvimgen.catalog.instances import get_builtin_catalog

__all__ = ["Catalog", "get_builtin_catalog"]
