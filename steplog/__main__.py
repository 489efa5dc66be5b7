"""Module entrypoint so the package can be run with ``python -m steplog``.

This simply forwards into the CLI entrypoint.
"""
from .cli import cli


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
