# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Entry point for Tod."""

import logging
import sys

from tod.cli import tod

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)


def main() -> None:
    """Main entry point."""
    tod(prog_name="tod")


if __name__ == "__main__":
    main()
