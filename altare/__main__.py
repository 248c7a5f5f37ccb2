"""Allow `python -m altare` as a shortcut for the management CLI"""

import sys

from altare.cli import main

sys.exit(main())
