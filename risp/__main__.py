import sys

from risp.repl import main

sys.exit(main())
