"""Allow ``python -m navtree``."""

from navtree.main import run

if __name__ == "__main__":
    run()
