"""
Shared fixtures for Skin Studio tests.

Qt runs on the offscreen platform so the suite works headless.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QPointF
from PyQt6.QtGui import QColor

from skin_studio.logic.project import SkinProject

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
CLEAR = (0, 0, 0, 0)


@pytest.fixture(autouse=True)
def _qt_app(qapp):
    """QPainter needs a running QApplication."""
    return qapp


@pytest.fixture
def project():
    return SkinProject()


@pytest.fixture
def layers(project):
    return project.layers


def fill_layer(layers, name, rgba):
    layers.image(name).fill(QColor(*rgba))


def pt(x, y):
    return QPointF(x, y)
