import sys

from textopts.core.cli import main

sys.exit(main())
