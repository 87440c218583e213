"""Allow ``python -m internmatch``."""
from internmatch.cli import main

if __name__ == "__main__":
    main()
