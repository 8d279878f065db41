"""In-memory 8-bit images with clamped pixel access."""

from __future__ import annotations

from os import PathLike
from typing import Optional, Union

from PIL import Image as _PILImage

_CHANNELS_BY_MODE = {"RGB": 3, "RGBA": 4}


class Image:
    """Row-major interleaved pixel data; RGB (3 channels) or RGBA (4 channels)."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        channels: int = 0,
        data: Optional[Union[bytes, bytearray]] = None,
    ) -> None:
        if width < 0 or height < 0 or channels < 0:
            raise ValueError(f"invalid image shape: {width}x{height}x{channels}")
        expected = width * height * channels
        if data is None:
            data = bytes(expected)
        if len(data) != expected:
            raise ValueError(
                f"data holds {len(data)} bytes, expected {expected} "
                f"for {width}x{height}x{channels}"
            )
        self.width = width
        self.height = height
        self.channels = channels
        self.data = bytearray(data)

    @classmethod
    def load(cls, filename: Union[str, PathLike]) -> Image:
        """Read an RGB or RGBA image file; other pixel formats raise ValueError."""
        with _PILImage.open(filename) as img:
            channels = _CHANNELS_BY_MODE.get(img.mode)
            if channels is None:
                raise ValueError(f"unsupported pixel format: {img.mode}")
            width, height = img.size
            return cls(width, height, channels, img.tobytes())

    def _clamped_offset(self, x: int, y: int) -> int:
        if self.width == 0 or self.height == 0 or not self.data:
            raise ValueError("image holds no pixel data")
        cx = min(max(x, 0), self.width - 1)
        cy = min(max(y, 0), self.height - 1)
        return (cy * self.width + cx) * self.channels

    def _unchecked_offset(self, x: int, y: int) -> int:
        offset = (y * self.width + x) * self.channels
        if offset < 0 or offset + self.channels > len(self.data):
            raise IndexError(f"pixel ({x}, {y}) lies outside the image data")
        return offset

    def at(self, x: int, y: int) -> bytes:
        """Channel values of the pixel at (x, y), coordinates clamped to the image."""
        offset = self._clamped_offset(x, y)
        return bytes(self.data[offset:offset + self.channels])

    def channel_at(self, x: int, y: int, index: int) -> int:
        """One channel of the pixel at (x, y), coordinates clamped to the image."""
        if not 0 <= index < self.channels:
            raise IndexError(f"channel index out of range: {index}")
        return self.data[self._clamped_offset(x, y) + index]

    def alpha_at(self, x: int, y: int) -> int:
        """Alpha of the pixel at (x, y), clamped; 255 when there is no alpha."""
        if self.channels != 4:
            return 255
        return self.data[self._clamped_offset(x, y) + 3]

    def at_unchecked(self, x: int, y: int) -> bytes:
        """Channel values at (x, y) without clamping the coordinates."""
        offset = self._unchecked_offset(x, y)
        return bytes(self.data[offset:offset + self.channels])

    def alpha_at_unchecked(self, x: int, y: int) -> int:
        """Alpha at (x, y) without clamping; 255 when there is no alpha."""
        if self.channels != 4:
            return 255
        return self.data[self._unchecked_offset(x, y) + 3]

    def has_alpha(self) -> bool:
        """Whether the image carries an alpha channel."""
        return self.channels == 4

    def free(self) -> None:
        """Drop the pixel data."""
        self.data = bytearray()