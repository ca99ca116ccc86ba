import sys

from polycubes.cli import main

sys.exit(main())
