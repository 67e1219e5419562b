"""Tests for SceneController wiring: input, physics, pacing and rendering."""
from __future__ import annotations

import math

import pytest

from springline import TickScheduler
from springline_pacing import QualityLevel, signals
from springline_scene import (
    NullRenderer,
    RenderFrame,
    Renderer,
    SceneConfig,
    SceneController,
)
from springline_scene.config import DEFAULT_POINTS

STEP_MS = 1000.0 / 60 + 0.05


class FakeTime:
    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds * 1000.0


class RecordingRenderer:
    def __init__(self, fake: FakeTime | None = None, cost_ms: float = 0.0) -> None:
        self.frames: list[RenderFrame] = []
        self._fake = fake
        self.cost_ms = cost_ms

    def draw(self, frame: RenderFrame) -> None:
        self.frames.append(frame)
        if self._fake is not None:
            self._fake.now += self.cost_ms


def _make(cost_ms: float = 0.0, **config) -> tuple[SceneController, FakeTime, RecordingRenderer]:
    fake = FakeTime()
    renderer = RecordingRenderer(fake, cost_ms)
    controller = SceneController(
        config=SceneConfig(**config) if config else None,
        renderer=renderer,
        time_fn=fake,
    )
    return controller, fake, renderer


def _run(controller: SceneController, fake: FakeTime, n: int,
         step: float = STEP_MS) -> list[RenderFrame]:
    frames = []
    for _ in range(n):
        fake.now += step
        frame = controller.tick(fake.now)
        if frame is not None:
            frames.append(frame)
    return frames


# ── Frames ─────────────────────────────────────────────────────


class TestFrames:
    def test_tick_before_interval_is_skipped(self) -> None:
        controller, _, renderer = _make()
        assert controller.tick(5.0) is None
        assert renderer.frames == []
        assert controller.clock.tick_number == 0

    def test_first_frame_at_high_quality(self) -> None:
        controller, _, renderer = _make()
        frame = controller.tick(20.0)
        assert frame is not None
        assert renderer.frames == [frame]
        assert controller.last_frame is frame
        assert frame.level is QualityLevel.HIGH
        assert len(frame.curve) == 201
        assert [line.sample.t for line in frame.tangents] == [0.0, 0.25, 0.5, 0.75, 1.0]
        assert all(line.barbs is not None for line in frame.tangents)
        assert frame.control_points == DEFAULT_POINTS

    def test_tangent_lines_have_configured_length(self) -> None:
        controller, _, _ = _make(tangent_length=42.0)
        frame = controller.tick(20.0)
        for line in frame.tangents:
            length = math.dist(line.sample.point, line.end)
            assert math.isclose(length, 42.0)

    def test_default_renderer_is_null(self) -> None:
        controller = SceneController(time_fn=FakeTime())
        assert isinstance(controller.tick(20.0), RenderFrame)

    def test_renderers_satisfy_protocol(self) -> None:
        assert isinstance(NullRenderer(), Renderer)
        assert isinstance(RecordingRenderer(), Renderer)


# ── Input ──────────────────────────────────────────────────────


class TestInput:
    def test_hover_does_not_drag(self) -> None:
        controller, _, _ = _make()
        controller.pointer_move(300.0, 400.0)
        lead = controller.state.springs[0]
        assert lead.target == DEFAULT_POINTS[1]
        assert (controller.state.pointer.x, controller.state.pointer.y) == (300.0, 400.0)

    def test_pressed_move_drags_lead_spring_only(self) -> None:
        controller, _, _ = _make()
        controller.pointer_down()
        controller.pointer_move(300.0, 400.0)
        lead, follower = controller.state.springs
        assert lead.target == (300.0, 400.0)
        assert follower.target == DEFAULT_POINTS[2]

    def test_release_stops_dragging(self) -> None:
        controller, _, _ = _make()
        controller.pointer_down(10.0, 10.0)
        controller.pointer_up()
        controller.pointer_move(300.0, 400.0)
        assert controller.state.springs[0].target == DEFAULT_POINTS[1]

    def test_leave_releases(self) -> None:
        controller, _, _ = _make()
        controller.pointer_down()
        controller.pointer_leave()
        assert not controller.state.pointer.pressed

    def test_touch_always_drags(self) -> None:
        controller, _, _ = _make()
        controller.touch_move(250.0, 50.0)
        assert controller.state.springs[0].target == (250.0, 50.0)

    def test_touch_start_presses_without_dragging(self) -> None:
        controller, fake, _ = _make()
        controller.touch_start(250.0, 50.0)
        pointer = controller.state.pointer
        assert pointer.pressed
        assert (pointer.x, pointer.y) == (250.0, 50.0)
        assert controller.state.springs[0].target == DEFAULT_POINTS[1]

        # Pointer indicator shows for touch contacts
        (frame,) = _run(controller, fake, 1)
        assert frame.pointer.pressed

        controller.touch_move(300.0, 60.0)
        assert controller.state.springs[0].target == (300.0, 60.0)
        controller.pointer_up()
        assert not controller.state.pointer.pressed

    def test_touch_start_ignores_non_finite_position(self) -> None:
        controller, _, _ = _make()
        controller.touch_start(float("nan"), 5.0)
        pointer = controller.state.pointer
        assert pointer.pressed
        assert (pointer.x, pointer.y) == (0.0, 0.0)

    def test_non_finite_input_is_ignored(self) -> None:
        controller, _, _ = _make()
        controller.pointer_down(100.0, 100.0)
        controller.pointer_move(float("nan"), 5.0)
        controller.touch_move(float("inf"), 5.0)
        assert (controller.state.pointer.x, controller.state.pointer.y) == (100.0, 100.0)
        assert controller.state.springs[0].target == DEFAULT_POINTS[1]

    def test_retarget_uses_last_pointer(self) -> None:
        controller, _, _ = _make()
        controller.pointer_move(123.0, 321.0)
        controller.retarget()
        assert controller.state.springs[0].target == (123.0, 321.0)

    def test_pointer_snapshot_in_frame(self) -> None:
        controller, fake, _ = _make()
        controller.pointer_down(50.0, 60.0)
        (frame,) = _run(controller, fake, 1)
        assert frame.pointer.pressed
        controller.pointer_up()
        # The frame kept its own copy
        assert frame.pointer.pressed


# ── Physics ────────────────────────────────────────────────────


class TestPhysics:
    def test_drag_moves_interior_points_toward_pointer(self) -> None:
        controller, fake, _ = _make()
        controller.pointer_down()
        controller.pointer_move(300.0, 400.0)
        frames = _run(controller, fake, 60 * 120)

        p0, p1, p2, p3 = frames[-1].control_points
        assert p0 == DEFAULT_POINTS[0]
        assert p3 == DEFAULT_POINTS[3]
        assert math.isclose(p1[0], 300.0, abs_tol=1.0)
        assert math.isclose(p1[1], 400.0, abs_tol=1.0)
        # P2 follows P1 through the chained target
        assert math.isclose(p2[0], 300.0, abs_tol=5.0)
        assert math.isclose(p2[1], 400.0, abs_tol=5.0)

    def test_physics_ignores_wall_time_between_frames(self) -> None:
        smooth, smooth_time, _ = _make()
        choppy, choppy_time, _ = _make()
        for controller in (smooth, choppy):
            controller.pointer_down()
            controller.pointer_move(450.0, 20.0)

        _run(smooth, smooth_time, 90)
        _run(choppy, choppy_time, 90, step=100.0)

        for a, b in zip(smooth.state.springs, choppy.state.springs):
            assert (a.x, a.y, a.vx, a.vy) == (b.x, b.y, b.vx, b.vy)

    def test_sliders_apply_to_all_springs(self) -> None:
        controller, _, _ = _make()
        assert controller.set_stiffness(0.6) == 0.6
        assert controller.set_damping(0.25) == 0.25
        for body in controller.state.springs:
            assert body.stiffness == 0.6
            assert body.damping == 0.25

    def test_sliders_clamp_to_unit_range(self) -> None:
        controller, _, _ = _make()
        assert controller.set_stiffness(3.0) == 1.0
        assert controller.set_damping(-1.0) == 0.0
        assert controller.state.stiffness == 1.0
        assert controller.state.damping == 0.0

    def test_extra_systems_run_after_springs(self) -> None:
        controller, fake, _ = _make()
        seen = []
        controller.add_system(
            lambda state, ctx: seen.append((ctx.tick_number, state.control_points[1].x))
        )
        _run(controller, fake, 3)
        assert [tick for tick, _ in seen] == [1, 2, 3]

    def test_signals_from_systems_are_delivered_within_the_frame(self) -> None:
        controller, fake, _ = _make()
        bus = controller.bus
        seen = []
        bus.subscribe("frame_built", lambda name, data: seen.append(data["tick"]))
        controller.add_system(lambda state, ctx: bus.publish("frame_built", tick=ctx.tick_number))

        for expected in ([1], [1, 2], [1, 2, 3]):
            _run(controller, fake, 1)
            assert seen == expected
            assert bus.pending == 0

    def test_skipped_tick_does_not_flush(self) -> None:
        controller, _, _ = _make()
        controller.bus.publish("queued")
        assert controller.tick(5.0) is None
        assert controller.bus.pending == 1


# ── Quality adaptation ─────────────────────────────────────────


class TestQuality:
    def test_slow_frames_lower_detail_and_warn(self) -> None:
        controller, fake, renderer = _make(cost_ms=25.0)
        warnings = []
        controller.bus.subscribe(signals.WARNING_SHOWN, lambda n, d: warnings.append(d))

        frames = _run(controller, fake, 7)
        assert [len(f.curve) for f in frames] == [201] * 6 + [101]
        assert frames[-1].level is QualityLevel.MEDIUM
        assert all(line.barbs is None for line in frames[-1].tangents)
        assert warnings == [{"level": "Medium"}]

    def test_sustained_slowness_reaches_low(self) -> None:
        controller, fake, _ = _make(cost_ms=25.0)
        frames = _run(controller, fake, 30)
        assert frames[-1].level is QualityLevel.LOW
        assert len(frames[-1].curve) == 51
        assert [line.sample.t for line in frames[-1].tangents] == [0.5]

    def test_recovers_when_frames_get_cheap(self) -> None:
        controller, fake, renderer = _make(cost_ms=25.0)
        _run(controller, fake, 6)
        assert controller.governor.level is QualityLevel.MEDIUM
        renderer.cost_ms = 5.0
        _run(controller, fake, 31)
        assert controller.governor.level is QualityLevel.HIGH

    def test_fps_reports_reach_subscribers(self) -> None:
        controller, fake, _ = _make()
        reports = []
        controller.bus.subscribe(signals.FPS_REPORT, lambda n, d: reports.append(d))
        _run(controller, fake, 130)
        assert len(reports) == 2
        assert reports[0]["quality"] == "High"
        assert reports[0]["fps"] == 60


# ── Reset ──────────────────────────────────────────────────────


class TestReset:
    def test_reset_restores_topology_and_quality(self) -> None:
        controller, fake, renderer = _make(cost_ms=25.0)
        controller.set_stiffness(0.5)
        controller.pointer_down()
        controller.pointer_move(10.0, 10.0)
        _run(controller, fake, 20)
        assert controller.governor.level is QualityLevel.LOW

        controller.reset()
        state = controller.state
        assert state.points() == DEFAULT_POINTS
        assert controller.governor.level is QualityLevel.HIGH
        assert controller.governor.slow_frame_score == 0
        assert controller.governor.fast_frame_score == 0
        # Slider values and pointer survive the reset
        assert [body.stiffness for body in state.springs] == [0.5, 0.5]
        assert state.pointer.pressed
        assert all(body.velocity == (0.0, 0.0) for body in state.springs)

    def test_first_frame_after_reset_is_high(self) -> None:
        controller, fake, renderer = _make(cost_ms=25.0)
        _run(controller, fake, 12)
        controller.reset()
        renderer.cost_ms = 0.0
        (frame,) = _run(controller, fake, 1)
        assert len(frame.curve) == 201


# ── Scheduler integration ──────────────────────────────────────


def test_controller_runs_under_tick_scheduler():
    fake = FakeTime()
    renderer = RecordingRenderer()
    controller = SceneController(renderer=renderer, time_fn=fake)

    def stop_after_ten_frames(state, ctx) -> None:
        if ctx.tick_number >= 10:
            ctx.request_stop()

    controller.add_system(stop_after_ten_frames)
    scheduler = TickScheduler(controller, fps=240, time_fn=fake, sleep_fn=fake.sleep)
    scheduler.run_forever()

    assert len(renderer.frames) == 10
    # 240 Hz host callback, 60 Hz rendering: four or five callbacks per frame
    assert 40 <= scheduler.clock.tick_number <= 51


def test_invalid_config_is_rejected():
    from springline_scene import ConfigError

    with pytest.raises(ConfigError):
        SceneConfig(stiffness=1.5)
    with pytest.raises(ConfigError):
        SceneConfig(initial_points=((0.0, 0.0),) * 3)
    with pytest.raises(ValueError):
        SceneConfig(damping=-0.1)
