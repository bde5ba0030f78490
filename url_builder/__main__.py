"""A program that builds URLs from the command line."""
from .cli import make_app

app = make_app()


if __name__ == "__main__":
    app()
