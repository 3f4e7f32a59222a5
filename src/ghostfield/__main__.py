"""Entry point for ghostfield."""

import logging

from textual.logging import TextualHandler

from ghostfield.app import GhostFieldApp
from ghostfield.config import parse_args, resolve_settings


def main() -> None:
    """Run the ghostfield demo application."""
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        handlers=[TextualHandler()],
    )
    app = GhostFieldApp(settings=resolve_settings(args))
    app.run()


if __name__ == "__main__":
    main()
