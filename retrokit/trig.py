"""Fixed-point trigonometry lookup tables and an integer arctangent."""

from __future__ import annotations

import math
import struct


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _build_sin_m() -> tuple[list[int], list[int]]:
    sins = [int(_f32(math.sin(i / 256.0 * math.pi)) * 4096.0) for i in range(0x200)]
    coss = [int(_f32(math.cos(i / 256.0 * math.pi)) * 4096.0) for i in range(0x200)]
    for index, value in ((0, 4096), (128, 0), (256, -4096), (384, 0)):
        coss[index] = value
    for index, value in ((0, 0), (128, 4096), (256, 0), (384, -4096)):
        sins[index] = value
    return sins, coss


def _build_512() -> tuple[list[int], list[int]]:
    sins = []
    coss = []
    for i in range(0x200):
        arg = _f32(_f32(i / 256) * math.pi)
        sins.append(int(_f32(math.sin(arg)) * 512.0))
        coss.append(int(_f32(math.cos(arg)) * 512.0))
    for index, value in ((0, 0x200), (128, 0), (256, -0x200), (384, 0)):
        coss[index] = value
    for index, value in ((0, 0), (128, 0x200), (256, 0), (384, -0x200)):
        sins[index] = value
    return sins, coss


def _build_atan() -> bytes:
    scale = _f32(40.743664)
    table = bytearray(0x100 * 0x100)
    for x in range(0x100):
        row = 0x100 * x
        for y in range(0x100):
            angle = _f32(math.atan2(y, x))
            table[row + y] = int(_f32(angle * scale)) & 0xFF
    return bytes(table)


_SIN_M, _COS_M = _build_sin_m()
_SIN_512, _COS_512 = _build_512()
_SIN_256 = [_SIN_512[i * 2] >> 1 for i in range(0x100)]
_COS_256 = [_COS_512[i * 2] >> 1 for i in range(0x100)]
_ATAN_256 = _build_atan()


def sin_m(angle: int) -> int:
    """Sine scaled by 4096 over a 512-step circle."""
    return _SIN_M[angle & 0x1FF]


def cos_m(angle: int) -> int:
    """Cosine scaled by 4096 over a 512-step circle."""
    return _COS_M[angle & 0x1FF]


def sin512(angle: int) -> int:
    """Sine scaled by 512 over a 512-step circle."""
    if angle < 0:
        angle = 0x200 - angle
    return _SIN_512[angle & 0x1FF]


def cos512(angle: int) -> int:
    """Cosine scaled by 512 over a 512-step circle."""
    if angle < 0:
        angle = 0x200 - angle
    return _COS_512[angle & 0x1FF]


def sin256(angle: int) -> int:
    """Sine scaled by 256 over a 256-step circle."""
    if angle < 0:
        angle = 0x100 - angle
    return _SIN_256[angle & 0xFF]


def cos256(angle: int) -> int:
    """Cosine scaled by 256 over a 256-step circle."""
    if angle < 0:
        angle = 0x100 - angle
    return _COS_256[angle & 0xFF]


def arc_tan_lookup(x: int, y: int) -> int:
    """Angle of the vector (x, y) as a byte, 256 steps per turn."""
    x_val = abs(x)
    y_val = abs(y)
    if x_val <= y_val:
        while y_val > 0xFF:
            x_val >>= 4
            y_val >>= 4
    else:
        while x_val > 0xFF:
            x_val >>= 4
            y_val >>= 4
    value = _ATAN_256[0x100 * x_val + y_val]
    if x <= 0:
        result = value - 0x80 if y <= 0 else -0x80 - value
    elif y <= 0:
        result = -value
    else:
        result = value
    return result & 0xFF