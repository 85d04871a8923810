# topmark:header:start
#
#   project      : NvimGen
#   file         : __init__.py
#   file_relpath : src/nvimgen/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for NvimGen.

Holds the logging setup and the TOML selections document I/O used by the CLI.
The emitter core never imports from here except for loggers.
"""
