from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from handconfig.codec import CODECS, UnknownActionError, decode_into, encode_all
from handconfig.config import SyncConfig
from handconfig.settings import SettingsState
from handconfig.sinks import FileSink, RecordSink, UdpSink

logger = logging.getLogger(__name__)


class ConfigFileError(ValueError):
    def __init__(self, path: Path, line_no: int, reason: str) -> None:
        super().__init__(f"{path}:{line_no}: {reason}")
        self.path = path
        self.line_no = line_no
        self.reason = reason


def _log_error(message: str) -> None:
    logger.error("%s", message)


class SettingsSynchronizer:
    """Owns the in-memory settings and routes `key=value` records to a sink.

    Records go to the sink passed to `dispatch`/`flush_all` when there is one
    (a file being saved), otherwise to the live UDP sink. While `initializing`
    is set every dispatch is dropped, so populating defaults sends nothing.
    """

    def __init__(
        self,
        config: SyncConfig | None = None,
        *,
        live_sink: RecordSink | None = None,
        on_status: Callable[[str], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        self.config = config if config is not None else SyncConfig()
        self._live_sink = live_sink if live_sink is not None else UdpSink(self.config.host, self.config.port)
        self.on_status: Callable[[str], None] = on_status or (lambda _text: None)
        self.on_error: Callable[[str], None] = on_error or _log_error

        # Covers the core's own construction pass only; the UI fills its
        # widgets with blockSignals (setting_controls.py).
        self.initializing = True
        self.state = SettingsState()
        self.initializing = False

    # Core routing.

    def dispatch(self, key: str, value: str, sink: RecordSink | None = None) -> None:
        if self.initializing:
            return

        record = f"{key}={value}"
        if sink is not None:
            sink.write(record)
            return

        logger.debug("live: %s", record)
        self._live_sink.write(record)
        self.on_status(record)

    def flush_all(self, sink: RecordSink | None = None) -> None:
        for key, value in encode_all(self.state):
            self.dispatch(key, value, sink)

    def snapshot(self) -> list[str]:
        """The records a flush would send right now (ignores the guard)."""

        return [f"{key}={value}" for key, value in encode_all(self.state)]

    # Menu operations.

    def save_to_file(self, path: Path | str) -> None:
        path = Path(path)
        with path.open("w", encoding="utf-8") as f:
            self.flush_all(FileSink(f))
        logger.info("Saved configuration to %s", path)
        self.on_status(f"Saved to {path}")

    def load_from_file(self, path: Path | str) -> None:
        path = Path(path)
        line_no = 0
        with path.open("r", encoding="utf-8") as f:
            try:
                for line_no, raw in enumerate(f, start=1):
                    self._load_line(path, line_no, raw.rstrip("\r\n"))
            except UnicodeDecodeError as e:
                # Text is decoded in chunks, so the failing line is only approximate.
                raise ConfigFileError(path, line_no + 1, f"not UTF-8 text ({e.reason})") from e

        if not self.config.flush_per_line:
            self.flush_all()
        logger.info("Loaded configuration from %s", path)
        self.on_status(f"Loaded from {path}")

    def _load_line(self, path: Path, line_no: int, line: str) -> None:
        if "=" not in line:
            return
        key, _, value = line.partition("=")

        try:
            if not decode_into(self.state, key, value):
                logger.debug("Ignoring unknown key %r (%s:%d)", key, path, line_no)
        except UnknownActionError as e:
            self.on_error(str(e))
        except ValueError as e:
            raise ConfigFileError(path, line_no, str(e)) from e

        if self.config.flush_per_line:
            self.flush_all()

    def push_all(self) -> None:
        self.flush_all()
        self.on_status("Pushed all settings")

    def restore_defaults(self) -> None:
        self.initializing = True
        try:
            self.state.reset()
        finally:
            self.initializing = False
        self.flush_all()
        self.on_status("Restored defaults")

    # Per-control updates: mutate, then send only the affected records.

    def _send(self, *keys: str) -> None:
        for key in keys:
            self.dispatch(key, CODECS[key].encode(self.state))

    def set_offset(self, side: str, offset_mm: tuple[int, int, int]) -> None:
        self.state.set_offset(side, offset_mm)
        self._send(f"{side}.transform.vec")

    def set_rotation(self, side: str, euler_deg: tuple[int, int, int]) -> None:
        self.state.set_rotation(side, euler_deg)
        self._send(f"{side}.transform.euler", f"{side}.transform.quat")

    def set_hand_disabled(self, side: str, disabled: bool) -> None:
        self.state.set_hand_disabled(side, disabled)
        self._send(f"{side}.enabled")

    def set_grip_joint(self, index: int) -> None:
        self.state.set_grip_joint(index)
        self._send("grip_joint")

    def set_aim_joint(self, index: int) -> None:
        self.state.set_aim_joint(index)
        self._send("aim_joint")

    def set_binding(self, key: str, index: int) -> None:
        self.state.set_binding(key, index)
        self._send(key)

    def set_near(self, gesture: str, near: int) -> tuple[int, int]:
        _, old_far = self.state.thresholds[gesture]
        pair = self.state.set_near(gesture, near)
        if pair[1] != old_far:
            self._send(f"{gesture}.far")
        self._send(f"{gesture}.near")
        return pair

    def set_far(self, gesture: str, far: int) -> tuple[int, int]:
        old_near, _ = self.state.thresholds[gesture]
        pair = self.state.set_far(gesture, far)
        if pair[0] != old_near:
            self._send(f"{gesture}.near")
        self._send(f"{gesture}.far")
        return pair

    def set_click_threshold(self, value: int) -> None:
        self.state.set_click_threshold(value)
        self._send("click_threshold")

    def set_display_disabled(self, disabled: bool) -> None:
        self.state.set_display_disabled(disabled)
        self._send("display.enabled")

    def set_proj_layer_index(self, value: int) -> None:
        self.state.set_proj_layer_index(value)
        self._send("proj_layer_index")

    def set_force_own_depth_buffer(self, forced: bool) -> None:
        self.state.set_force_own_depth_buffer(forced)
        self._send("force_own_depth_buffer")

    def set_skin_tone(self, index: int) -> None:
        self.state.set_skin_tone(index)
        self._send("skin_tone")

    def set_opacity(self, value: int) -> None:
        self.state.set_opacity(value)
        self._send("opacity")
