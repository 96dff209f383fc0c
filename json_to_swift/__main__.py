"""Allow ``python -m json_to_swift``."""

import sys

from .cli import main

sys.exit(main())
