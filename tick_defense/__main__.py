import sys

from tick_defense.cli import main

sys.exit(main())
