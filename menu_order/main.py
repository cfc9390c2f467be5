"""Entry point for the menu-order Textual app."""

from __future__ import annotations

import structlog

from menu_order.log import configure_logging
from menu_order.menu_app import MenuOrderApp


def main() -> None:
    """Run the Textual application."""
    log_file = configure_logging()
    try:
        MenuOrderApp().run()
    finally:
        structlog.reset_defaults()
        log_file.close()


if __name__ == "__main__":
    main()
