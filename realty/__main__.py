"""Allow ``python -m realty``."""

import sys

from realty.cli import main

sys.exit(main())
