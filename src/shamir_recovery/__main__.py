import sys

from shamir_recovery.cli import main

sys.exit(main())
