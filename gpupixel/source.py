"""Frame sources that feed a framebuffer to a set of targets."""

from __future__ import annotations

from typing import Protocol

from gpupixel.rotation import RotationMode, rotation_swaps_size


class _Framebuffer(Protocol):
    width: int
    height: int


class _Target(Protocol):
    def next_available_texture_index(self) -> int: ...

    def set_input_framebuffer(
        self,
        framebuffer: _Framebuffer | None,
        rotation: RotationMode,
        tex_idx: int,
    ) -> None: ...

    def is_prepared(self) -> bool: ...

    def update(self, frame_time: int) -> None: ...

    def unprepare(self) -> None: ...


class Source:
    """Holds an output framebuffer and pushes it to the targets it feeds.

    Each target is attached at a texture index. When the source proceeds,
    every target receives the framebuffer with the source's output rotation,
    and targets that report themselves prepared are updated.
    """

    def __init__(self) -> None:
        self._framebuffer: _Framebuffer | None = None
        self._output_rotation = RotationMode.NO_ROTATION
        self._targets: dict[_Target, int] = {}
        self.framebuffer_scale = 1.0

    @property
    def targets(self) -> dict[_Target, int]:
        """The attached targets, mapped to their texture indices."""
        return self._targets

    @property
    def framebuffer(self) -> _Framebuffer | None:
        """The current output framebuffer, or None."""
        return self._framebuffer

    @property
    def output_rotation(self) -> RotationMode:
        """The rotation applied when frames go out to the targets."""
        return self._output_rotation

    def add_target(self, target: _Target, tex_idx: int | None = None) -> Source | None:
        """Attach ``target`` at ``tex_idx``, or at its next free texture index.

        A target already attached is left as it is. Returns the target when
        it is itself a source, so chains can be built, else None.
        """
        if tex_idx is None:
            tex_idx = target.next_available_texture_index()
        if not self.has_target(target):
            self._targets[target] = tex_idx
            target.set_input_framebuffer(
                self._framebuffer, RotationMode.NO_ROTATION, tex_idx
            )
        return target if isinstance(target, Source) else None

    def has_target(self, target: _Target) -> bool:
        """Whether ``target`` is attached."""
        return target in self._targets

    def remove_target(self, target: _Target) -> None:
        """Detach ``target`` if it is attached."""
        self._targets.pop(target, None)

    def remove_all_targets(self) -> None:
        """Detach every target."""
        self._targets.clear()

    def set_framebuffer(
        self,
        framebuffer: _Framebuffer | None,
        output_rotation: RotationMode = RotationMode.NO_ROTATION,
    ) -> None:
        """Replace the output framebuffer and its rotation."""
        self._framebuffer = framebuffer
        self._output_rotation = RotationMode(output_rotation)

    def rotated_framebuffer_width(self) -> int:
        """Framebuffer width after the output rotation; 0 without a framebuffer."""
        fb = self._framebuffer
        if fb is None:
            return 0
        return fb.height if rotation_swaps_size(self._output_rotation) else fb.width

    def rotated_framebuffer_height(self) -> int:
        """Framebuffer height after the output rotation; 0 without a framebuffer."""
        fb = self._framebuffer
        if fb is None:
            return 0
        return fb.width if rotation_swaps_size(self._output_rotation) else fb.height

    def proceed(self, update_targets: bool = True, frame_time: int = 0) -> bool:
        """Push the current frame on, updating targets when asked to."""
        if update_targets:
            self.update_targets(frame_time)
        return True

    def update_targets(self, frame_time: int) -> None:
        """Hand the framebuffer to every target and update the prepared ones."""
        for target, tex_idx in list(self._targets.items()):
            target.set_input_framebuffer(
                self._framebuffer, self._output_rotation, tex_idx
            )
            if target.is_prepared():
                target.update(frame_time)
                target.unprepare()