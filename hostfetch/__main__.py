"""Allow ``python -m hostfetch``."""

from hostfetch.cli import main

main()
