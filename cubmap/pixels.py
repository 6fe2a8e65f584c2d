"""In-memory pixel images and colour conversion for display visuals."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_mask(mask: int, channel: str) -> int:
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask, got {mask!r}")
    return mask


def _mask_shift(mask: int) -> tuple[int, int]:
    """Return (offset of lowest set bit, width of the run of set bits)."""
    offset = 0
    while not mask & 1:
        mask >>= 1
        offset += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return offset, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, int, int, int, int, int]:
    """Describe three channel masks as (offset, width) pairs, red first.

    The result is ``(red_offset, red_bits, green_offset, green_bits,
    blue_offset, blue_bits)``.
    """
    shifts: list[int] = []
    for mask, channel in ((red_mask, "red"), (green_mask, "green"), (blue_mask, "blue")):
        shifts.extend(_mask_shift(_check_mask(mask, channel)))
    return tuple(shifts)  # type: ignore[return-value]


def visual_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual.

    Visuals of 24 bits or more take the colour unchanged; shallower ones
    pack each channel according to ``shifts`` (as from :func:`rgb_shifts`).
    """
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_off, red_bits, green_off, green_bits, blue_off, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_off)
        + ((green >> (16 - green_bits)) << green_off)
        + ((blue >> (16 - blue_bits)) << blue_off)
    )


@dataclass
class Image:
    """A packed-pixel image, rows stored top to bottom."""

    width: int
    height: int
    bpp: int = 32
    big_endian: bool = False
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.bpp <= 0 or self.bpp % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {self.bpp}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def size_line(self) -> int:
        """Number of bytes in one row."""
        return self.width * self.bytes_per_pixel

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def _encode(self, color: int) -> bytes:
        opp = self.bytes_per_pixel
        return (color & ((1 << (8 * opp)) - 1)).to_bytes(opp, self._byteorder)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at column ``x`` of row ``y``."""
        start = self._offset(x, y)
        self.data[start:start + self.bytes_per_pixel] = self._encode(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value at column ``x`` of row ``y``."""
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + self.bytes_per_pixel], self._byteorder)

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self.data[:] = self._encode(color) * (self.width * self.height)