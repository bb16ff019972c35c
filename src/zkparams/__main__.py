import sys

from zkparams.cli import main

sys.exit(main())
