"""Allow ``python -m freightctl`` invocation."""

from __future__ import annotations

from freightctl.cli.app import main

if __name__ == "__main__":
    main()
