"""Entry point for scripture-ref."""

from scripture_ref.cli import main


if __name__ == "__main__":
    main()
