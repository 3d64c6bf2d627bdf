import os
from PyQt6.QtGui import QImage


def asset_path(relative_path):
    """
    Resolves a config path against the package folder.
    Absolute paths are returned unchanged.
    """
    if os.path.isabs(relative_path):
        return relative_path
    base_path = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(base_path, relative_path)


def image_to_bytes(image):
    """Raw RGBA8888 rows of a 32-bit image as a mutable bytearray"""
    ptr = image.constBits()
    return bytearray(ptr.asstring(image.sizeInBytes()))


def bytes_to_image(data, width, height, image_format=QImage.Format.Format_RGBA8888):
    # copy() detaches the image from the Python buffer
    return QImage(bytes(data), width, height, width * 4, image_format).copy()
