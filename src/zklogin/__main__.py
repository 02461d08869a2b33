import sys

from zklogin.cli.main import main

sys.exit(main())
