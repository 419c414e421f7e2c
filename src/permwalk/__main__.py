from __future__ import annotations

import sys

from permwalk.main import main

sys.exit(main())
