import sys

from launchvm.cli import main

sys.exit(main())
