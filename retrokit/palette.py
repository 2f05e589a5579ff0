"""Indexed colour palettes stored both packed (16-bit) and as RGB888 entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PALETTE_COUNT = 0x8
PALETTE_SIZE = 0x100
DEFAULT_SCREEN_HEIGHT = 240
ACTIVE_PALETTE = 0xFF


class RenderType(Enum):
    """Which renderer the packed colours are prepared for."""

    SW = "software"
    HW = "hardware"


@dataclass(frozen=True)
class PaletteEntry:
    """A single RGB888 colour."""

    r: int = 0
    g: int = 0
    b: int = 0


def rgb888_to_rgb565(r: int, g: int, b: int) -> int:
    """Pack an RGB888 colour into RGB565, as used by the software renderer."""
    return (b >> 3) | ((g >> 2) << 5) | ((r >> 3) << 11)


def rgb888_to_rgb5551(r: int, g: int, b: int) -> int:
    """Pack an RGB888 colour into RGB5551 with the alpha bit clear."""
    return ((b >> 3) << 1) | ((g >> 3) << 6) | ((r >> 3) << 11)


class PaletteBank:
    """Eight 256-colour palettes plus the per-line selection and fade state."""

    def __init__(self, render_type: RenderType = RenderType.SW, screen_height: int = DEFAULT_SCREEN_HEIGHT):
        self.render_type = render_type
        self.screen_height = screen_height
        self.full_palette: list[list[int]] = [[0] * PALETTE_SIZE for _ in range(PALETTE_COUNT)]
        self.full_palette32: list[list[PaletteEntry]] = [
            [PaletteEntry() for _ in range(PALETTE_SIZE)] for _ in range(PALETTE_COUNT)
        ]
        self.line_buffer: list[int] = [0] * screen_height
        self.active_index = 0
        self.tex_palette_num = 0
        self.palette_mode = 0
        self.fade_mode = 0
        self.fade_r = 0
        self.fade_g = 0
        self.fade_b = 0
        self.fade_a = 0

    @property
    def active_palette(self) -> list[int]:
        """The packed colours of the active palette."""
        return self.full_palette[self.active_index]

    @property
    def active_palette32(self) -> list[PaletteEntry]:
        """The RGB888 colours of the active palette."""
        return self.full_palette32[self.active_index]

    def _pack(self, r: int, g: int, b: int) -> int:
        if self.render_type == RenderType.HW:
            return rgb888_to_rgb5551(r, g, b)
        return rgb888_to_rgb565(r, g, b)

    def set_entry(self, palette_index: int, index: int, r: int, g: int, b: int) -> None:
        """Set one colour; a palette index of -1 (or 0xFF) targets the active palette."""
        palette_index &= 0xFF
        index &= 0xFF
        r, g, b = r & 0xFF, g & 0xFF, b & 0xFF
        if palette_index == ACTIVE_PALETTE:
            packed_list = self.active_palette
            entries = self.active_palette32
        else:
            packed_list = self.full_palette[palette_index]
            entries = self.full_palette32[palette_index]
        packed = self._pack(r, g, b)
        if self.render_type == RenderType.HW and index:
            packed |= 1
        packed_list[index] = packed
        entries[index] = PaletteEntry(r, g, b)

    def set_active_palette(self, palette_id: int, start_line: int, end_line: int) -> None:
        """Select the palette used for a range of screen lines (or the texture palette)."""
        if self.render_type == RenderType.SW:
            if palette_id < PALETTE_COUNT:
                for line in range(max(start_line, 0), min(end_line, self.screen_height)):
                    self.line_buffer[line] = palette_id
            self.active_index = self.line_buffer[0]
        elif palette_id < PALETTE_COUNT:
            self.tex_palette_num = palette_id

    def copy_palette(self, src: int, dest: int) -> None:
        """Copy a whole palette; out-of-range indices are ignored."""
        if src < PALETTE_COUNT and dest < PALETTE_COUNT:
            self.full_palette[dest][:] = self.full_palette[src]
            self.full_palette32[dest][:] = self.full_palette32[src]

    def rotate_palette(self, start_index: int, end_index: int, right: bool) -> None:
        """Cycle the active palette's colours between two indices, inclusive."""
        for colours in (self.active_palette, self.active_palette32):
            if start_index >= end_index:
                if right:
                    colours[start_index] = colours[end_index]
                else:
                    colours[end_index] = colours[start_index]
                continue
            segment = colours[start_index:end_index + 1]
            if right:
                colours[start_index:end_index + 1] = segment[-1:] + segment[:-1]
            else:
                colours[start_index:end_index + 1] = segment[1:] + segment[:1]

    def set_fade(self, r: int, g: int, b: int, alpha: int) -> None:
        """Set a full-screen fade colour; alpha is clamped to 255."""
        self.fade_mode = 1
        self.fade_r = r & 0xFF
        self.fade_g = g & 0xFF
        self.fade_b = b & 0xFF
        self.fade_a = min(alpha, 0xFF)

    def set_limited_fade(self, palette_id: int, r: int, g: int, b: int, alpha: int,
                         start_index: int, end_index: int) -> None:
        """Blend a range of a palette towards a colour and make that palette active."""
        if palette_id >= PALETTE_COUNT:
            return
        self.palette_mode = 1
        self.active_index = palette_id
        alpha = min(alpha, PALETTE_SIZE - 1)
        if start_index >= end_index:
            return
        inverse = 0xFF - alpha
        packed_list = self.active_palette
        entries = self.active_palette32
        for i in range(start_index, end_index):
            old = entries[i]
            nr = ((r * alpha + inverse * old.r) & 0xFFFF) >> 8
            ng = ((g * alpha + inverse * old.g) & 0xFFFF) >> 8
            nb = ((b * alpha + inverse * old.b) & 0xFFFF) >> 8
            packed = self._pack(nr, ng, nb)
            if self.render_type == RenderType.HW:
                packed |= 1
            packed_list[i] = packed
            entries[i] = PaletteEntry(nr, ng, nb)

    def load_act(self, data: bytes, palette_id: int, start_palette_index: int,
                 start_index: int, end_index: int) -> None:
        """Load colours ``start_index``..``end_index`` of a raw RGB .act file.

        Palette 0, or any index out of range, writes to the active palette.
        """
        if end_index > start_index and len(data) < 3 * end_index:
            raise ValueError(
                f"palette data holds {len(data) // 3} colours, {end_index} needed"
            )
        if palette_id >= PALETTE_COUNT or palette_id < 0:
            palette_id = 0
        target = palette_id if palette_id else -1
        position = start_palette_index
        for i in range(start_index, end_index):
            r, g, b = data[3 * i:3 * i + 3]
            self.set_entry(target, position, r, g, b)
            position = (position + 1) & 0xFF