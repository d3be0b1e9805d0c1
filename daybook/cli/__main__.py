"""Allow running the CLI as ``python -m daybook.cli``."""
from daybook.cli import cli

if __name__ == "__main__":
    cli(obj={})
