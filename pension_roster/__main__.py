import sys

from pension_roster.cli import main

sys.exit(main())
