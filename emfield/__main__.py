import sys

from emfield.demo import main

if __name__ == "__main__":
    sys.exit(main())
