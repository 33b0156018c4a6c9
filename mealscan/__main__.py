import sys

from mealscan.cli import main

sys.exit(main())
