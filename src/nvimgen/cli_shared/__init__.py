# topmark:header:start
#
#   project      : NvimGen
#   file         : __init__.py
#   file_relpath : src/nvimgen/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-free helpers shared by NvimGen frontends (console protocol, exit codes, formats)."""
