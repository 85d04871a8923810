# topmark:header:start
#
#   project      : NvimGen
#   file         : __init__.py
#   file_relpath : src/nvimgen/catalog/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in option definitions, grouped by catalog category."""
