import sys

from charngram.cli import main

sys.exit(main())
