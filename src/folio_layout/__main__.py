"""Allow ``python -m folio_layout``."""

from folio_layout.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
