import sys

from weatherview.cli import main

sys.exit(main())
