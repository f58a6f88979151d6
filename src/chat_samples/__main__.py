"""Allow ``python -m chat_samples``."""

import sys

from chat_samples.cli import main

sys.exit(main())
