# topmark:header:start
#
#   project      : NvimGen
#   file         : __main__.py
#   file_relpath : src/nvimgen/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running NvimGen via ``python -m nvimgen``.

Delegates to :func:`nvimgen.cli.main.cli`, the same entry point used by the
``nvimgen`` console script.
"""

from __future__ import annotations

from nvimgen.cli.main import cli

if __name__ == "__main__":
    cli()
