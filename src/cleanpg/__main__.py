"""Entry point for `python -m cleanpg` and `cleanpg` CLI."""

from cleanpg.cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
