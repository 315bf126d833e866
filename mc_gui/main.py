"""Console entrypoint for the GUI (mc-admin)."""

from __future__ import annotations

import sys


def main() -> int:
    """Launch the GUI application."""
    # Configure logging before anything else
    from mc_common.api import configure_logging

    configure_logging()

    # Import Qt after logging is configured
    from PySide6.QtWidgets import QApplication

    from mc_gui.app import create_app

    app = QApplication(sys.argv)
    app.setApplicationName("MicroCover Admin")
    app.setOrganizationName("microcover")

    window = create_app()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
