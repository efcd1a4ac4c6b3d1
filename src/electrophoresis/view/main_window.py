"""
Main Application Window
=======================
The primary GUI container holding the control panel, the gel and the chart.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the Run Controller signals to the widgets that
   render them, and tears the controller down when the window closes.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter, QMessageBox
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from electrophoresis.config import VISIBLE_APP_NAME
from electrophoresis.controller.run_controller import RunController
from electrophoresis.model.state import RunPhase
from electrophoresis.view.panels.control_panel import ControlPanel
from electrophoresis.view.widgets.gel_view import GelView
from electrophoresis.view.widgets.migration_plot import MigrationPlot

logger = logging.getLogger(__name__)

RUN_ACTION_LABELS = {
    RunPhase.IDLE: "Start",
    RunPhase.RUNNING: "Pause",
    RunPhase.PAUSED: "Resume",
}


class MainWindow(QMainWindow):
    def __init__(self, controller: RunController) -> None:
        super().__init__()
        self.controller: RunController = controller
        config = controller.state.config

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 700)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(splitter)

        # --- LEFT SIDE: Controls ---
        self.control_panel = ControlPanel(self.controller)
        splitter.addWidget(self.control_panel)

        # --- CENTER: Gel ---
        self.gel_view = GelView(config)
        splitter.addWidget(self.gel_view)

        # --- RIGHT SIDE: Migration chart ---
        self.migration_plot = MigrationPlot(config)
        splitter.addWidget(self.migration_plot)

        splitter.setSizes([250, 500, 450])

        # --- SIGNAL CONNECTIONS ---
        # 1. Load / Reset -> rebuild bands
        self.controller.fragments_reset.connect(self.gel_view.set_fragments)
        self.controller.fragments_reset.connect(self.migration_plot.set_fragments)

        # 2. Frame -> move bands
        self.controller.fragments_moved.connect(self.gel_view.update_fragments)
        self.controller.fragments_moved.connect(self.migration_plot.update_fragments)

        # 3. Start without samples -> tell the user
        self.controller.start_rejected.connect(self.on_start_rejected)

        # 4. Phase -> run action label
        self.controller.phase_changed.connect(self.on_phase_changed)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()
        self.on_phase_changed(self.controller.phase)

    def _create_actions(self) -> None:
        self.act_load = QAction("Load DNA Samples", self)
        self.act_load.setShortcut("Ctrl+L")
        self.act_load.triggered.connect(lambda: self.controller.load_lanes())

        self.act_start = QAction("Start", self)
        self.act_start.setShortcut("Space")
        self.act_start.triggered.connect(self.on_toggle_run)

        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.controller.reset)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        run_menu = menu_bar.addMenu("&Run")
        run_menu.addAction(self.act_load)
        run_menu.addSeparator()
        run_menu.addAction(self.act_start)
        run_menu.addAction(self.act_reset)
        run_menu.addSeparator()
        run_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_toggle_run(self) -> None:
        """Space bar: pause a running gel, otherwise start/resume it."""
        if self.controller.state.is_running:
            self.controller.pause()
        else:
            self.controller.start()

    def on_phase_changed(self, phase: RunPhase) -> None:
        self.act_start.setText(RUN_ACTION_LABELS[phase])

    def on_start_rejected(self, message: str) -> None:
        QMessageBox.warning(self, VISIBLE_APP_NAME, message)

    def closeEvent(self, event) -> None:
        self.controller.teardown()
        logger.info("Main window closed.")
        super().closeEvent(event)
