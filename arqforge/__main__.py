import sys

from arqforge.cli.cli import main

sys.exit(main())
