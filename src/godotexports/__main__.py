"""Allow ``python -m godotexports``."""

from godotexports.cli import main

main()
