"""PySide6 admin dashboard for the micro-insurance platform."""
