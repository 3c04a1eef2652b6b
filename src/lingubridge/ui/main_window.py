"""Main Window - Application shell with menus and status bar."""

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QLabel, QMainWindow, QMessageBox, QVBoxLayout, QWidget


class MainWindow(QMainWindow):
    """Provides the application shell, menus and message dialogs."""

    # Menu actions mirrored from the panel buttons
    export_requested = Signal()
    copy_requested = Signal()
    swap_requested = Signal()
    clear_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("LinguBridge AI")
        self.setGeometry(100, 100, 1100, 640)

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

        self.model_label = QLabel()
        self.statusBar().addPermanentWidget(self.model_label)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        # File menu
        file_menu = menu_bar.addMenu("&File")

        export_action = QAction("&Export PDF", self)
        export_action.setShortcut("Ctrl+S")
        export_action.triggered.connect(self.export_requested.emit)
        file_menu.addAction(export_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Edit menu
        edit_menu = menu_bar.addMenu("&Edit")

        copy_action = QAction("&Copy Translation", self)
        copy_action.setShortcut("Ctrl+Shift+C")
        copy_action.triggered.connect(self.copy_requested.emit)
        edit_menu.addAction(copy_action)

        swap_action = QAction("&Swap Languages", self)
        swap_action.setShortcut("Ctrl+L")
        swap_action.triggered.connect(self.swap_requested.emit)
        edit_menu.addAction(swap_action)

        clear_action = QAction("C&lear", self)
        clear_action.setShortcut("Ctrl+Shift+Backspace")
        clear_action.triggered.connect(self.clear_requested.emit)
        edit_menu.addAction(clear_action)

    def set_panel(self, panel):
        """Set the translator panel in the main layout."""
        self.main_layout.addWidget(panel)

    def set_model_name(self, model_name: str):
        """Show the active model in the status bar."""
        self.model_label.setText(f"{model_name} active")

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)
