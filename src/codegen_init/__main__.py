"""`python -m codegen_init` 진입점."""

import sys

from codegen_init.cli import main

sys.exit(main())
