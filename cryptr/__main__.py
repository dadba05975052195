import sys

from cryptr.cli import main

sys.exit(main())
