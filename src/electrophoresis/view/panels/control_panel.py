"""
Run Control Panel
"""
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSlider, QGroupBox, QFormLayout
)
from PySide6.QtCore import Qt

from electrophoresis.config import VOLTAGE_MAX, VOLTAGE_MIN
from electrophoresis.controller.run_controller import RunController
from electrophoresis.model.state import RunPhase
from electrophoresis.utils import format_elapsed


class ControlPanel(QWidget):
    def __init__(self, controller: RunController) -> None:
        super().__init__()
        self.controller = controller

        layout = QVBoxLayout(self)

        # --- Power Supply Group ---
        grp = QGroupBox("Power Supply")
        form = QFormLayout(grp)

        self.voltage_slider = QSlider(Qt.Horizontal)
        self.voltage_slider.setRange(VOLTAGE_MIN, VOLTAGE_MAX)
        self.voltage_slider.setSingleStep(1)
        self.voltage_slider.setPageStep(10)
        self.voltage_slider.setValue(controller.state.voltage)
        self.voltage_slider.valueChanged.connect(self.on_slider_moved)

        self.lbl_voltage = QLabel(f"{controller.state.voltage} V")
        self.lbl_voltage.setMinimumWidth(50)

        row = QHBoxLayout()
        row.addWidget(self.voltage_slider, 1)
        row.addWidget(self.lbl_voltage)
        form.addRow("Voltage:", row)

        self.lbl_timer = QLabel(format_elapsed(0))
        self.lbl_timer.setStyleSheet("font-size: 20px; font-weight: bold;")
        form.addRow("Time:", self.lbl_timer)

        layout.addWidget(grp)

        # --- Actions ---
        self.btn_load = QPushButton("Load DNA Samples")
        self.btn_load.setMinimumHeight(40)
        self.btn_load.clicked.connect(self.on_load_clicked)
        layout.addWidget(self.btn_load)

        self.btn_start = QPushButton("Start")
        self.btn_start.setMinimumHeight(40)
        self.btn_start.clicked.connect(self.controller.start)
        layout.addWidget(self.btn_start)

        self.btn_pause = QPushButton("Pause")
        self.btn_pause.clicked.connect(self.controller.pause)
        layout.addWidget(self.btn_pause)

        self.btn_reset = QPushButton("Reset")
        self.btn_reset.clicked.connect(self.controller.reset)
        layout.addWidget(self.btn_reset)

        # --- Status Info ---
        self.lbl_status = QLabel("")
        self.lbl_status.setAlignment(Qt.AlignCenter)
        self.lbl_status.setStyleSheet("color: gray;")
        layout.addWidget(self.lbl_status)

        layout.addStretch()

        # --- SIGNAL CONNECTIONS ---
        self.controller.phase_changed.connect(self.refresh_affordances)
        self.controller.loaded_changed.connect(self.refresh_affordances)
        self.controller.elapsed_changed.connect(self.on_elapsed_changed)
        self.controller.voltage_changed.connect(self.on_voltage_changed)
        self.controller.fragments_moved.connect(self.on_fragments_moved)

        self.refresh_affordances()

    # --- PROPERTIES ---

    @property
    def status_message(self) -> str:
        return self.lbl_status.text()

    @status_message.setter
    def status_message(self, text: str) -> None:
        self.lbl_status.setText(text)

    # --- SLOTS ---

    def on_load_clicked(self) -> None:
        self.controller.load_lanes()

    def on_slider_moved(self, value: int) -> None:
        self.controller.set_voltage(value)

    def on_voltage_changed(self, voltage: int) -> None:
        self.lbl_voltage.setText(f"{voltage} V")
        if self.voltage_slider.value() != voltage:
            self.voltage_slider.setValue(voltage)

    def on_fragments_moved(self, moved: list) -> None:
        # Only the frame that finishes the last band changes the status
        if any(f.finished for f in moved) and self.controller.state.registry.all_finished:
            self.refresh_affordances()

    def on_elapsed_changed(self, seconds: int) -> None:
        self.lbl_timer.setText(format_elapsed(seconds))

    def refresh_affordances(self, *_) -> None:
        """Enable/disable the controls based on the run phase and loaded flag."""
        state = self.controller.state
        phase = state.phase

        self.btn_start.setEnabled(phase is not RunPhase.RUNNING)
        self.btn_start.setText("Resume" if phase is RunPhase.PAUSED else "Start")
        self.btn_pause.setEnabled(phase is RunPhase.RUNNING)

        self.btn_load.setEnabled(not state.loaded and phase is not RunPhase.RUNNING)
        self.btn_load.setText("Samples Loaded" if state.loaded else "Load DNA Samples")

        # Voltage is locked once a run has started
        self.voltage_slider.setEnabled(phase is RunPhase.IDLE)

        if state.registry.all_finished:
            self.status_message = "All bands reached the end of the gel"
        elif phase is RunPhase.RUNNING:
            self.status_message = f"Running at {state.voltage} V"
        elif phase is RunPhase.PAUSED:
            self.status_message = "Paused"
        elif state.loaded:
            self.status_message = f"{len(state.registry)} fragments loaded"
        else:
            self.status_message = "No samples loaded"
