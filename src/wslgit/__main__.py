import sys

from wslgit.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
