import sys

from trekrank.cli.commands import main

sys.exit(main())
