"""Main application window with sidebar navigation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import (
    QHBoxLayout,
    QListWidget,
    QMainWindow,
    QStackedWidget,
    QWidget,
)

if TYPE_CHECKING:
    from mc_gui.app import ServiceContainer


class MainWindow(QMainWindow):
    """Main application window with sidebar navigation."""

    SECTIONS = [
        ("Members", "members"),
        ("System", "system"),
    ]

    def __init__(self, services: "ServiceContainer", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.services = services
        self._views: dict[str, QWidget] = {}

        self._setup_ui()
        self._setup_views()
        self._sidebar.currentRowChanged.connect(self._stack.setCurrentIndex)

    def _setup_ui(self) -> None:
        self.setWindowTitle("MicroCover Admin")
        self.setMinimumSize(1100, 720)

        central = QWidget()
        central.setObjectName("mainRoot")
        self.setCentralWidget(central)
        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self._sidebar = QListWidget()
        self._sidebar.setObjectName("sidebar")
        self._sidebar.setFixedWidth(180)
        for label, _ in self.SECTIONS:
            self._sidebar.addItem(label)

        self._stack = QStackedWidget()
        main_layout.addWidget(self._sidebar)
        main_layout.addWidget(self._stack, 1)

    def _setup_views(self) -> None:
        from mc_gui.viewmodels import SystemViewModel, build_members_viewmodel
        from mc_gui.views import RecordsView, SystemView

        members_vm = build_members_viewmodel(
            self.services.members_service, self.services.settings
        )
        members_vm.setParent(self)
        system_vm = SystemViewModel(self.services.system_service, parent=self)

        self._views = {
            "members": RecordsView(members_vm),
            "system": SystemView(system_vm),
        }
        for _, key in self.SECTIONS:
            self._stack.addWidget(self._views[key])
        self._sidebar.setCurrentRow(0)

    def view(self, key: str) -> QWidget:
        return self._views[key]

    def closeEvent(self, event: object) -> None:
        """Close child views so they release pending timers and workers."""
        for view in self._views.values():
            view.close()
        super().closeEvent(event)  # type: ignore[arg-type]
