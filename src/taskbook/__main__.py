import sys

from taskbook.cli.main import main

sys.exit(main())
