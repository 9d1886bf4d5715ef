import sys

from adventure.app import main

sys.exit(main())
