"""
csvjson – Main entry point.

Minimal bootstrap script to verify the project structure is in place.
"""


def main() -> None:
    """Print a bootstrap confirmation message."""
    print("csvjson bootstrap complete")


if __name__ == "__main__":
    main()
