import sys

from errauditor.cli import main

sys.exit(main())
