"""Module entry point for the storacha-rclone command line."""
from .cli import main


if __name__ == "__main__":
    main()
