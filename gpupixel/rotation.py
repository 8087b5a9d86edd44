"""Rotation modes and the output rotation chosen for a camera."""

from __future__ import annotations

from enum import IntEnum


class RotationMode(IntEnum):
    """How a frame is rotated or flipped on its way to a target."""

    NO_ROTATION = 0
    ROTATE_LEFT = 1
    ROTATE_RIGHT = 2
    FLIP_VERTICAL = 3
    FLIP_HORIZONTAL = 4
    ROTATE_RIGHT_FLIP_VERTICAL = 5
    ROTATE_RIGHT_FLIP_HORIZONTAL = 6
    ROTATE_180 = 7


class CameraPosition(IntEnum):
    """Which side of the device a camera faces."""

    UNSPECIFIED = 0
    BACK = 1
    FRONT = 2


class InterfaceOrientation(IntEnum):
    """Orientation of the user interface the image is shown in."""

    UNKNOWN = 0
    PORTRAIT = 1
    PORTRAIT_UPSIDE_DOWN = 2
    LANDSCAPE_RIGHT = 3
    LANDSCAPE_LEFT = 4


_SWAPPING = frozenset(
    {
        RotationMode.ROTATE_LEFT,
        RotationMode.ROTATE_RIGHT,
        RotationMode.ROTATE_RIGHT_FLIP_VERTICAL,
        RotationMode.ROTATE_RIGHT_FLIP_HORIZONTAL,
    }
)


def rotation_swaps_size(rotation: RotationMode) -> bool:
    """Whether ``rotation`` exchanges a frame's width and height."""
    return rotation in _SWAPPING


_O = InterfaceOrientation
_R = RotationMode

_REAR_MIRRORED = {
    _O.PORTRAIT: _R.ROTATE_RIGHT_FLIP_VERTICAL,
    _O.PORTRAIT_UPSIDE_DOWN: _R.ROTATE_180,
    _O.LANDSCAPE_LEFT: _R.FLIP_HORIZONTAL,
    _O.LANDSCAPE_RIGHT: _R.FLIP_VERTICAL,
}

_REAR = {
    _O.PORTRAIT: _R.ROTATE_RIGHT,
    _O.PORTRAIT_UPSIDE_DOWN: _R.ROTATE_LEFT,
    _O.LANDSCAPE_LEFT: _R.ROTATE_180,
    _O.LANDSCAPE_RIGHT: _R.NO_ROTATION,
}

_FRONT_MIRRORED = {
    _O.PORTRAIT: _R.ROTATE_RIGHT_FLIP_VERTICAL,
    _O.PORTRAIT_UPSIDE_DOWN: _R.ROTATE_RIGHT_FLIP_HORIZONTAL,
    _O.LANDSCAPE_LEFT: _R.FLIP_HORIZONTAL,
    _O.LANDSCAPE_RIGHT: _R.FLIP_VERTICAL,
}

_FRONT = {
    _O.PORTRAIT: _R.ROTATE_RIGHT,
    _O.PORTRAIT_UPSIDE_DOWN: _R.ROTATE_LEFT,
    _O.LANDSCAPE_LEFT: _R.NO_ROTATION,
    _O.LANDSCAPE_RIGHT: _R.ROTATE_180,
}


def camera_output_rotation(
    position: CameraPosition,
    orientation: InterfaceOrientation,
    mirror_front: bool = False,
    mirror_rear: bool = False,
) -> RotationMode:
    """Rotation to apply to camera frames for the given interface orientation.

    Any position other than the back camera is treated as front-facing;
    an unknown orientation gives no rotation.
    """
    if position == CameraPosition.BACK:
        table = _REAR_MIRRORED if mirror_rear else _REAR
    else:
        table = _FRONT_MIRRORED if mirror_front else _FRONT
    return table.get(orientation, RotationMode.NO_ROTATION)