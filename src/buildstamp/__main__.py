"""Allow ``python -m buildstamp``."""

import sys

from buildstamp.cli import main

sys.exit(main())
