"""Allow running the package with python -m teamplanner."""

import sys

from .cli import main

sys.exit(main())
