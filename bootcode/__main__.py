import sys

from bootcode.cli import main

sys.exit(main())
