import sys

from compound_interest.cli import main

sys.exit(main())
