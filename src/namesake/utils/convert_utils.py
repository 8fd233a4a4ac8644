"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import time


class ConvertUtils:
    @staticmethod
    def timestamp_to_human(timestamp: float, fmt: str = "%Y-%m-%d %H:%M:%S %z") -> str:
        """
        Convert a Unix timestamp to a human-readable string.
        Uses local time by default.
        """
        try:
            return time.strftime(fmt, time.localtime(timestamp))
        except (OverflowError, OSError, ValueError):
            return "Invalid timestamp"

    @staticmethod
    def ramp_color(index: int, length: int) -> tuple:
        """
        Position of a file inside its group mapped onto a green -> red ramp.
        Returns an (r, g, b) tuple: first file pure green, last file pure red.
        """
        if length <= 1:
            return 0, 255, 0
        incr = int(index / (length - 1) * 255)
        return incr, 255 - incr, 0
