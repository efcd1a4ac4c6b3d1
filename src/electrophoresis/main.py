"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Simulation State (model).
2. Instantiates the Run Controller that drives it.
3. Instantiates the Main Window (View) and passes the controller in.
"""
import sys

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication

from electrophoresis.config import VISIBLE_APP_NAME
from electrophoresis.controller.run_controller import RunController
from electrophoresis.logging_config import setup_logging
from electrophoresis.model.state import SimulationState
from electrophoresis.view.main_window import MainWindow

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")


def main() -> int:
    # 1. Setup Logging (level from ELECTROPHORESIS_LOG_LEVEL, INFO by default)
    setup_logging()

    # 2. Create the Qt Application
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)

    # 3. Initialize the Data Model and its Controller
    state = SimulationState()
    controller = RunController(state)

    # 4. Initialize the Main Window, passing the controller
    window = MainWindow(controller)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
