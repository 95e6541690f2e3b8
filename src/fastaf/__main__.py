"""Entry point for ``python -m fastaf``."""

from fastaf.cli import main

if __name__ == "__main__":
    main()
