"""Allow ``python -m phrasegen``."""

from .cli import main

if __name__ == "__main__":
    main()
