import sys

from color_compat.cli import main

sys.exit(main())
