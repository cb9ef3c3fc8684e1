import sys

from sdftracer.cli import main

if __name__ == "__main__":
    sys.exit(main())
