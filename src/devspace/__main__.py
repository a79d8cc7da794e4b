"""Entry point for ``python -m devspace``."""

from devspace.cli.main import main


if __name__ == "__main__":
    main()
