"""Allow ``python -m albumtags``."""

import sys

from albumtags.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
