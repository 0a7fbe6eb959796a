"""Entry point for ``python -m bid_interceptor``."""

from .cli import main

if __name__ == "__main__":
    main()
