import sys

from ink.render.cli import main

sys.exit(main())
