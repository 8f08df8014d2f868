"""Allow ``python -m lazybrowse [PATH]``."""

from .cli import main


if __name__ == "__main__":
    main()
