import sys

from stripe_listener.cli import main

if __name__ == "__main__":
    sys.exit(main())
