"""Allow ``python -m entra_hygiene``."""

from .main import main

main()
