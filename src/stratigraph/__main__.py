"""Allow ``python -m stratigraph``."""

from stratigraph.presentation.cli import main

raise SystemExit(main())
