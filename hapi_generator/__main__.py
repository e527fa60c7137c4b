"""Allow ``python -m hapi_generator``."""

import sys

from hapi_generator.cli.commands import main

sys.exit(main())
