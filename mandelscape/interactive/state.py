"""
Application state and the frame loop.

The state is replaced, never mutated, by `update`. `FrameLoop` owns the only
copy and a single FIFO event queue: pointer moves are queued and applied in
order when the next tick drains the queue, and only ticks render.
"""

import logging
import math
from collections import deque
from dataclasses import dataclass, field, replace
from typing import Deque, Optional, Union

from ..core.frame import DrawableBatch, render_batch
from ..core.profiles import CameraConfig, VisualProfile, TAU
from ..core.projection import Rotation

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 33


@dataclass(frozen=True)
class Tick:
    time: float  # ms


@dataclass(frozen=True)
class PointerMoved:
    client_x: float
    client_y: float


Event = Union[Tick, PointerMoved]


@dataclass(frozen=True)
class ApplicationState:
    time: float = 0.0
    mouse_x: Optional[float] = None
    mouse_y: Optional[float] = None
    target_rotation: Rotation = field(default_factory=Rotation)
    current_rotation: Rotation = field(default_factory=Rotation)


# -----------------------------------------------------------------------------
# Camera targets
# -----------------------------------------------------------------------------

def drift_roll(t: float, camera: CameraConfig) -> float:
    if camera.axes < 3:
        return 0.0
    return camera.drift_amplitude * math.sin(TAU * t / camera.drift_period)


def pointer_target(client_x: float, client_y: float, camera: CameraConfig,
                   roll: float = 0.0) -> Rotation:
    """(pointer - centre) / centre * max_angle; x drives yaw, y drives pitch."""
    cx, cy = camera.center
    return Rotation(
        pitch=camera.base_pitch + (client_y - cy) / cy * camera.max_angle,
        yaw=(client_x - cx) / cx * camera.max_angle,
        roll=roll,
    )


def auto_target(t: float, camera: CameraConfig) -> Rotation:
    """Slow autonomous drift for profiles without pointer interaction."""
    phase = TAU * t / camera.drift_period
    return Rotation(
        pitch=camera.base_pitch + 0.5 * camera.drift_amplitude * math.sin(phase * 0.7),
        yaw=camera.drift_amplitude * math.sin(phase),
        roll=drift_roll(t, camera),
    )


def initial_state(profile: VisualProfile, time: float = 0.0) -> ApplicationState:
    camera = profile.camera
    if camera.interaction == 'auto':
        rest = auto_target(time, camera)
    else:
        rest = Rotation(pitch=camera.base_pitch, roll=drift_roll(time, camera))
    return ApplicationState(time=time, target_rotation=rest, current_rotation=rest)


def update(state: ApplicationState, event: Event, profile: VisualProfile) -> ApplicationState:
    """Apply one event and return the new state."""
    camera = profile.camera

    if isinstance(event, PointerMoved):
        if camera.interaction != 'pointer':
            return state
        target = pointer_target(event.client_x, event.client_y, camera,
                                roll=state.target_rotation.roll)
        return replace(state, mouse_x=event.client_x, mouse_y=event.client_y,
                       target_rotation=target)

    if isinstance(event, Tick):
        if camera.interaction == 'auto':
            target = auto_target(event.time, camera)
        else:
            target = replace(state.target_rotation, roll=drift_roll(event.time, camera))
        current = state.current_rotation.approach(target, camera.smoothing)
        return replace(state, time=event.time, target_rotation=target,
                       current_rotation=current)

    raise TypeError(f"Unknown event: {event!r}")


# -----------------------------------------------------------------------------
# Frame loop
# -----------------------------------------------------------------------------

class FrameLoop:
    """
    Owns the ApplicationState and serializes every event through one queue.
    """

    def __init__(self, profile: VisualProfile, start_time: float = 0.0):
        self.profile = profile
        self.state = initial_state(profile, start_time)
        self.events: Deque[Event] = deque()
        self.frames_rendered = 0

    def post(self, event: Event):
        """Queue an event; it is applied at the next tick."""
        self.events.append(event)

    def pointer_moved(self, client_x: float, client_y: float):
        self.post(PointerMoved(client_x, client_y))

    def _drain(self):
        while self.events:
            self.state = update(self.state, self.events.popleft(), self.profile)

    def tick(self, time: float) -> DrawableBatch:
        """Advance to `time` (ms) and render exactly one frame."""
        self.post(Tick(time))
        self._drain()

        batch = render_batch(self.state.time, self.state.current_rotation, self.profile)
        self.frames_rendered += 1

        if self.frames_rendered % 100 == 0:
            rot = self.state.current_rotation
            logger.info(f"Frame {self.frames_rendered}: t={self.state.time:.0f}ms "
                        f"pitch={rot.pitch:.3f} yaw={rot.yaw:.3f} roll={rot.roll:.3f}")
        return batch
