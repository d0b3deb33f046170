#!/usr/bin/env python3
"""
Results screen demo launcher.

Shows a synthetic analysis result and demo lead data in a Qt window.
"""

import sys
from typing import Optional, Sequence

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QApplication, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from .config.settings import get_config
from .core.logging_config import configure_logging, get_logger
from .ecg.analysis_result import AnalysisResult
from .ecg.plotting.plot_widgets import create_strip_stack
from .ecg.ui.display_updates import update_result_metrics_display
from .ecg.ui.results_screen import NoResultScreen, ResultsScreen, build_results_screen
from .ecg.utils.helpers import generate_demo_leads

logger = get_logger(__name__)

DEMO_RESULT = {
    "prediction": "Normal",
    "confidence": 91.4,
    "bpm": 74.2,
    "probabilities": {"Normal": 0.914, "AF": 0.052, "Other": 0.034},
    "processing_time": 0.84,
}


class ResultsWindow(QWidget):
    """Result ECG window: lead strips, metric boxes and risk label"""

    def __init__(self, screen, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle("Result ECG")
        layout = QVBoxLayout(self)

        if isinstance(screen, NoResultScreen):
            layout.addWidget(QLabel(f"{screen.title}\n{screen.message}"))
            return

        plot_area = QWidget()
        self.plot_widgets, self.data_lines = create_strip_stack(plot_area, screen.strips)
        layout.addWidget(plot_area)

        metrics_row = QHBoxLayout()
        self.metric_labels = {}
        for key, caption in (('heart_rate', 'BPM'), ('rhythm', 'Rhythm'), ('quality', 'Quality')):
            box = QVBoxLayout()
            value = QLabel()
            value.setFont(QFont("Arial", 20, QFont.Bold))
            value.setAlignment(Qt.AlignCenter)
            box.addWidget(value)
            box.addWidget(QLabel(caption), alignment=Qt.AlignCenter)
            metrics_row.addLayout(box)
            self.metric_labels[key] = value
        layout.addLayout(metrics_row)

        self.metric_labels['risk'] = QLabel()
        self.metric_labels['risk'].setStyleSheet(f"color: {screen.risk_meter.color}; font-weight: bold;")
        layout.addWidget(self.metric_labels['risk'])

        update_result_metrics_display(self.metric_labels, screen.display)


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = get_config()
    configure_logging(config.get('logging.level', 'INFO'), config.get('logging.file'))

    demo_leads = generate_demo_leads(seed=7)
    screen = build_results_screen(
        AnalysisResult.from_dict(DEMO_RESULT),
        list(demo_leads.values()),
        result_settings=config.result_settings(),
        display_settings=config.render_settings(),
    )
    if isinstance(screen, ResultsScreen):
        logger.info(f"Demo result: {screen.display}")

    app = QApplication(list(argv) if argv is not None else sys.argv)
    window = ResultsWindow(screen)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
