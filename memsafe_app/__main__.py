"""Run the demo program with ``python -m memsafe_app``."""

import sys

from .engine import main

sys.exit(main())
