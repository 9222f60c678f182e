"""Allow ``python -m prattcalc``."""

from prattcalc.cli import main

if __name__ == "__main__":
    main()
