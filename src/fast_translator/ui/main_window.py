"""Main Window - Application shell with toolbar, screen stack and notifications."""

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QToolBar, QWidget

from fast_translator.core import ThemeMode


class MainWindow(QMainWindow):
    """Provides the application shell: screen stack, toolbar actions and status messages."""

    # Signal emitted when user asks to leave the current screen
    back_requested = Signal()
    # Signal emitted when user clicks the theme toggle
    theme_toggle_requested = Signal()

    NOTIFICATION_TIMEOUT_MS = 5000

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Fast Translator")
        self.setGeometry(100, 100, 480, 820)

        self._setup_ui()
        self._create_toolbar()

    def _setup_ui(self):
        """Initialize the stacked central widget and status bar."""
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)
        self.statusBar()

    def _create_toolbar(self):
        toolbar = QToolBar("Main")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.back_action = QAction("← Back", self)
        self.back_action.setShortcut("Alt+Left")
        self.back_action.triggered.connect(self.back_requested.emit)
        self.back_action.setEnabled(False)
        toolbar.addAction(self.back_action)

        self.theme_action = QAction(self)
        self.theme_action.setToolTip("Toggle Theme")
        self.theme_action.setShortcut("Ctrl+T")
        self.theme_action.triggered.connect(self.theme_toggle_requested.emit)
        toolbar.addAction(self.theme_action)
        self.set_theme_mode(ThemeMode.DARK)

    def add_screen(self, screen: QWidget):
        if self.stack.indexOf(screen) == -1:
            self.stack.addWidget(screen)

    def display_screen(self, screen: QWidget, title: str, can_go_back: bool):
        """Bring a screen to the front of the stack."""
        self.add_screen(screen)
        self.stack.setCurrentWidget(screen)
        self.setWindowTitle(title)
        self.back_action.setEnabled(can_go_back)

    def current_screen(self) -> QWidget:
        return self.stack.currentWidget()

    def set_theme_mode(self, mode: ThemeMode):
        """Label the toggle with the mode it would switch to."""
        if mode is ThemeMode.DARK:
            self.theme_action.setText("☀ Light")
        else:
            self.theme_action.setText("☾ Dark")

    def show_notification(self, message: str, timeout_ms: int = NOTIFICATION_TIMEOUT_MS):
        """Show a transient message in the status bar."""
        self.statusBar().showMessage(message, timeout_ms)
