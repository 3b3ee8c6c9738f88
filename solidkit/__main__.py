"""Allow ``python -m solidkit``."""
import sys

from solidkit.cli.main import main

sys.exit(main())
