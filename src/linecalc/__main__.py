import sys

from linecalc.cli import main

sys.exit(main())
