"""Runs apache-toolkit."""
import sys

from apache_toolkit import main

if __name__ == '__main__':
    sys.exit(main.main())
