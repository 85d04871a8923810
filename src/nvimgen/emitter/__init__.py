# topmark:header:start
#
#   project      : NvimGen
#   file         : __init__.py
#   file_relpath : src/nvimgen/emitter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emitter core: encoding, ordering, section building and layout composition.

Data flows one way:

    Selections -> ordering -> section builders -> layout composer -> files

Every stage is a pure function of its input; nothing is cached between calls.
"""
