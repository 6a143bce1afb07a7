"""Allow running as ``python -m lsp_binary``."""

import sys

from lsp_binary.cli import main

sys.exit(main())
