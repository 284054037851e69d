import sys

from polarplot.cli import main

sys.exit(main())
