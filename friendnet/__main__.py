"""Allow `python -m friendnet`."""

import sys

from friendnet.cli import main

sys.exit(main())
