from PyQt6.QtWidgets import QLabel
from PyQt6.QtCore import QTimer
import psutil
import os


class DiagnosticsLabel(QLabel):
    """Status bar readout: process memory and undo depth"""

    def __init__(self, history_ref, interval_ms=1000, parent=None):
        super().__init__(parent)
        self.history = history_ref
        self.process = psutil.Process(os.getpid())

        # Timer setup
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.refresh_diagnostics)
        self.timer.start(interval_ms)
        self.refresh_diagnostics()

    def refresh_diagnostics(self):
        mem_mb = self.process.memory_info().rss / (1024 * 1024)
        stats = self.history.get_stats()
        self.setText(f"MEM: {mem_mb:.1f} MB   STEPS: {stats['undo_count']}/{stats['limit']}")
