"""Entry point for ``python -m crcf``."""

from crcf.cli import main

if __name__ == "__main__":
    main()
