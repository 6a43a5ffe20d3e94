"""
Shared test infrastructure.

Modules:
- file_utils: creating files and directories
- tree_builders: hand-built syntax trees for parser-independent tests
- cli_utils: running the CLI in a subprocess
- samples: Kotlin sources used by parser-backed tests
"""

from .file_utils import write
from .cli_utils import run_cli, jload
from .caret_utils import caret_on, line_col
from .samples import NO_PRESENTER, NO_PROXY_PROPERTY, PRESENTER_EMPTY_PROXY, PRESENTER_WITH_LOADING
from .tree_builders import (
    tok, ws, ident, lbrace, rbrace, prop, delegated, class_body, empty_body,
    class_decl, object_literal, proxy_prop, kt_file, presenter_file,
)

__all__ = [
    # File utilities
    "write",

    # CLI utilities
    "run_cli", "jload",

    # Caret utilities
    "caret_on", "line_col",

    # Kotlin samples
    "PRESENTER_EMPTY_PROXY", "PRESENTER_WITH_LOADING", "NO_PRESENTER", "NO_PROXY_PROPERTY",

    # Tree builders
    "tok", "ws", "ident", "lbrace", "rbrace", "prop", "delegated", "class_body", "empty_body",
    "class_decl", "object_literal", "proxy_prop", "kt_file", "presenter_file",
]
