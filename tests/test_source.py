from dataclasses import dataclass, field

import pytest

from gpupixel.rotation import RotationMode
from gpupixel.source import Source


@dataclass
class FakeFramebuffer:
    width: int
    height: int


@dataclass(eq=False)
class FakeTarget:
    next_index: int = 0
    prepared: bool = True
    inputs: list = field(default_factory=list)
    updates: list = field(default_factory=list)
    unprepared: int = 0

    def next_available_texture_index(self):
        return self.next_index

    def set_input_framebuffer(self, framebuffer, rotation, tex_idx):
        self.inputs.append((framebuffer, rotation, tex_idx))

    def is_prepared(self):
        return self.prepared

    def update(self, frame_time):
        self.updates.append(frame_time)

    def unprepare(self):
        self.unprepared += 1
        self.prepared = False


class ChainedSource(Source, FakeTarget):
    def __init__(self):
        Source.__init__(self)
        FakeTarget.__init__(self)

    __hash__ = object.__hash__


def test_new_source_has_no_framebuffer_and_no_targets():
    source = Source()
    assert source.framebuffer is None
    assert source.targets == {}
    assert source.output_rotation is RotationMode.NO_ROTATION
    assert source.rotated_framebuffer_width() == 0
    assert source.rotated_framebuffer_height() == 0


def test_add_target_uses_next_available_index():
    source = Source()
    target = FakeTarget(next_index=3)
    assert source.add_target(target) is None
    assert source.targets == {target: 3}
    assert target.inputs == [(None, RotationMode.NO_ROTATION, 3)]


def test_add_target_with_explicit_index_passes_framebuffer():
    source = Source()
    fb = FakeFramebuffer(640, 480)
    source.set_framebuffer(fb, RotationMode.ROTATE_LEFT)
    target = FakeTarget()
    source.add_target(target, 2)
    assert source.targets[target] == 2
    assert target.inputs == [(fb, RotationMode.NO_ROTATION, 2)]


def test_adding_same_target_twice_keeps_first_index():
    source = Source()
    target = FakeTarget()
    source.add_target(target, 1)
    source.add_target(target, 5)
    assert source.targets == {target: 1}
    assert len(target.inputs) == 1


def test_add_target_returns_source_targets_for_chaining():
    source = Source()
    chained = ChainedSource()
    assert source.add_target(chained, 0) is chained


def test_remove_target():
    source = Source()
    first, second = FakeTarget(), FakeTarget()
    source.add_target(first, 0)
    source.add_target(second, 1)
    source.remove_target(first)
    assert not source.has_target(first)
    assert source.has_target(second)
    source.remove_target(first)
    assert list(source.targets) == [second]


def test_remove_all_targets():
    source = Source()
    source.add_target(FakeTarget(), 0)
    source.add_target(FakeTarget(), 1)
    source.remove_all_targets()
    assert source.targets == {}


@pytest.mark.parametrize(
    "rotation",
    [
        RotationMode.ROTATE_LEFT,
        RotationMode.ROTATE_RIGHT,
        RotationMode.ROTATE_RIGHT_FLIP_VERTICAL,
        RotationMode.ROTATE_RIGHT_FLIP_HORIZONTAL,
    ],
)
def test_rotated_size_swaps_for_quarter_turns(rotation):
    source = Source()
    source.set_framebuffer(FakeFramebuffer(640, 480), rotation)
    assert source.rotated_framebuffer_width() == 480
    assert source.rotated_framebuffer_height() == 640


@pytest.mark.parametrize(
    "rotation",
    [
        RotationMode.NO_ROTATION,
        RotationMode.FLIP_VERTICAL,
        RotationMode.FLIP_HORIZONTAL,
        RotationMode.ROTATE_180,
    ],
)
def test_rotated_size_kept_otherwise(rotation):
    source = Source()
    source.set_framebuffer(FakeFramebuffer(640, 480), rotation)
    assert source.rotated_framebuffer_width() == 640
    assert source.rotated_framebuffer_height() == 480


def test_set_framebuffer_defaults_to_no_rotation():
    source = Source()
    source.set_framebuffer(FakeFramebuffer(2, 1), RotationMode.ROTATE_180)
    fb = FakeFramebuffer(4, 3)
    source.set_framebuffer(fb)
    assert source.framebuffer is fb
    assert source.output_rotation is RotationMode.NO_ROTATION


def test_proceed_updates_prepared_targets():
    source = Source()
    fb = FakeFramebuffer(8, 6)
    source.set_framebuffer(fb, RotationMode.FLIP_VERTICAL)
    ready = FakeTarget(prepared=True)
    idle = FakeTarget(prepared=False)
    source.add_target(ready, 0)
    source.add_target(idle, 1)
    assert source.proceed(True, 42) is True
    assert ready.inputs[-1] == (fb, RotationMode.FLIP_VERTICAL, 0)
    assert idle.inputs[-1] == (fb, RotationMode.FLIP_VERTICAL, 1)
    assert ready.updates == [42]
    assert ready.unprepared == 1
    assert idle.updates == []
    assert idle.unprepared == 0


def test_proceed_without_update_leaves_targets_alone():
    source = Source()
    target = FakeTarget()
    source.add_target(target, 0)
    assert source.proceed(False) is True
    assert len(target.inputs) == 1
    assert target.updates == []


def test_proceed_defaults_frame_time_to_zero():
    source = Source()
    target = FakeTarget()
    source.add_target(target, 0)
    source.proceed()
    assert target.updates == [0]


def test_update_targets_only_updates_once_until_prepared_again():
    source = Source()
    target = FakeTarget()
    source.add_target(target, 0)
    source.update_targets(1)
    source.update_targets(2)
    assert target.updates == [1]
    target.prepared = True
    source.update_targets(3)
    assert target.updates == [1, 3]
    assert target.unprepared == 2


def test_framebuffer_scale_defaults_to_one():
    source = Source()
    assert source.framebuffer_scale == 1.0
    source.framebuffer_scale = 0.5
    assert source.framebuffer_scale == 0.5