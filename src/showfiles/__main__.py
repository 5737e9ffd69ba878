"""Allow ``python -m showfiles``."""

from showfiles.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
