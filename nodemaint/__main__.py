"""Allow ``python -m nodemaint``."""

from nodemaint.cli import main

if __name__ == "__main__":
    main()
