"""Main entry point for the lxcconf command line."""

from lxcconf.cli.main import main


if __name__ == "__main__":
    main()
