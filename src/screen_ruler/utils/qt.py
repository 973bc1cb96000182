"""Qt helper utilities."""

from typing import Iterable

from PySide6 import QtCore, QtGui
import numpy as np

from ..models import WindowGeometry


def qpoint_to_array(p: QtCore.QPointF) -> np.ndarray:
    """Convert a :class:`~PySide6.QtCore.QPointF` into a ``float64`` point."""
    return np.array([float(p.x()), float(p.y())], dtype=np.float64)


def array_to_qpoint(p: np.ndarray) -> QtCore.QPointF:
    return QtCore.QPointF(float(p[0]), float(p[1]))


def geometry_to_qrect(geom: WindowGeometry) -> QtCore.QRect:
    return QtCore.QRect(geom.x, geom.y, geom.w, geom.h)


def geometries_to_region(rects: Iterable[WindowGeometry]) -> QtGui.QRegion:
    """Union of ``rects`` as a :class:`~PySide6.QtGui.QRegion`."""
    region = QtGui.QRegion()
    for geom in rects:
        region = region.united(QtGui.QRegion(geometry_to_qrect(geom)))
    return region


__all__ = [
    "qpoint_to_array",
    "array_to_qpoint",
    "geometry_to_qrect",
    "geometries_to_region",
]
