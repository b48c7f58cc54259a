"""Allow ``python -m keypath``."""

import sys

from keypath.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
