# SPDX-License-Identifier: MIT
import sys

from webring.cli import main

sys.exit(main())
