import sys

from mcoptions.reporting.cli import main

sys.exit(main())
