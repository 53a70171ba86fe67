import sys

from mcmfixtures.cmd.cli import main

sys.exit(main())
