import sys

from msprefixspan.Main import main

if __name__ == "__main__":
    sys.exit(main())
