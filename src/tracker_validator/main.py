import asyncio
import sys

from tracker_validator.infrastructure.entrypoints.action import run_action


def main() -> None:
    """Console entry point for the ``tracker-validator`` GitHub Action step."""
    sys.exit(asyncio.run(run_action()))


if __name__ == "__main__":
    main()
