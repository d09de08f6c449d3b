"""CloudWatch Log Channel - Main entry point.

Resolve, inspect and test log channels.
"""
from src.adapters.inbound.cli_adapter import main as cli_main


def main() -> None:
    """Main entry point - delegates to CLI adapter."""
    cli_main()


if __name__ == "__main__":
    main()
