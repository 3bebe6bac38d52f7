"""Allow ``python -m jobdash``."""

from .cli import main

if __name__ == "__main__":
    main()
