"""Allow `python -m fmtwizard`."""

from fmtwizard.cli import main

if __name__ == "__main__":
    main()
