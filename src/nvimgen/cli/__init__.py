# topmark:header:start
#
#   project      : NvimGen
#   file         : __init__.py
#   file_relpath : src/nvimgen/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface of NvimGen."""
