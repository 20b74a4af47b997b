"""Allow ``python -m movie_finder.cli``."""

from .main import main

main()
