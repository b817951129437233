"""Allow ``python -m fabletime``."""

from __future__ import annotations

# Local Imports
from . import main

if __name__ == "__main__":
    main()
