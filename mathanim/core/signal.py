# mathanim/core/signal.py
"""
SignalBridge - Observer hub that lets outside code follow scene playback.

A renderer connects to SIGNAL_FRAME to present each stepped frame; tools
can watch membership and play boundaries the same way. Handlers never
influence playback: an exception in one is logged and the remaining
handlers still run.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# Signal Names
# =============================================================================

SIGNAL_MOBJECT_ADDED = 'mobject_added'        # (mobject,)
SIGNAL_MOBJECT_REMOVED = 'mobject_removed'    # (mobject,)
SIGNAL_PLAY_BEGIN = 'play_begin'              # (animations, run_time)
SIGNAL_FRAME = 'frame'                        # (FrameState,)
SIGNAL_PLAY_END = 'play_end'                  # (animations,)

SCENE_SIGNALS = frozenset({
    SIGNAL_MOBJECT_ADDED,
    SIGNAL_MOBJECT_REMOVED,
    SIGNAL_PLAY_BEGIN,
    SIGNAL_FRAME,
    SIGNAL_PLAY_END,
})


# =============================================================================
# Connection Handle
# =============================================================================

@dataclass
class Connection:
    """Handle returned by connect(); call disconnect() to stop receiving."""
    signal: str
    handler: Callable
    once: bool = False
    active: bool = field(default=True, compare=False)

    def disconnect(self):
        self.active = False


# =============================================================================
# Signal Bridge
# =============================================================================

class SignalBridge:
    """
    Routes named signals to their handlers in connection order.

    Disconnecting is lazy: a handle is only marked inactive, and inactive
    handles are pruned after the outermost emit returns. This keeps
    disconnects made from inside a handler safe during delivery.
    """

    def __init__(self):
        self._connections: Dict[str, List[Connection]] = {}
        self._blocked: set = set()
        self._emit_depth: int = 0

    def connect(self, signal: str, handler: Callable, once: bool = False) -> Connection:
        if signal not in SCENE_SIGNALS:
            logger.warning(f"Connecting to unknown signal '{signal}'")
        connection = Connection(signal=signal, handler=handler, once=once)
        self._connections.setdefault(signal, []).append(connection)
        return connection

    def connect_once(self, signal: str, handler: Callable) -> Connection:
        return self.connect(signal, handler, once=True)

    def disconnect_all(self, signal: Optional[str] = None):
        targets = [signal] if signal else list(self._connections)
        for name in targets:
            for connection in self._connections.get(name, []):
                connection.disconnect()
        self._prune()

    def emit(self, signal: str, *args, **kwargs) -> int:
        """
        Deliver a signal to every active handler.

        Returns:
            Number of handlers called
        """
        if signal in self._blocked:
            return 0

        called = 0
        self._emit_depth += 1
        try:
            for connection in list(self._connections.get(signal, [])):
                if not connection.active:
                    continue
                if connection.once:
                    connection.disconnect()
                called += 1
                try:
                    connection.handler(*args, **kwargs)
                except Exception:
                    logger.exception(f"Handler for signal '{signal}' failed")
        finally:
            self._emit_depth -= 1
            if self._emit_depth == 0:
                self._prune()
        return called

    def block(self, signal: str):
        self._blocked.add(signal)

    def unblock(self, signal: str):
        self._blocked.discard(signal)

    def is_connected(self, signal: str) -> bool:
        return any(c.active for c in self._connections.get(signal, []))

    def _prune(self):
        if self._emit_depth > 0:
            return
        for name in list(self._connections):
            remaining = [c for c in self._connections[name] if c.active]
            if remaining:
                self._connections[name] = remaining
            else:
                del self._connections[name]


# =============================================================================
# Convenience
# =============================================================================

class SignalEmitter:
    """Mixin for objects that publish signals through an optional bridge."""

    _bridge: Optional[SignalBridge] = None

    def bind_bridge(self, bridge: Optional[SignalBridge]):
        self._bridge = bridge

    def emit(self, signal: str, *args, **kwargs) -> int:
        if self._bridge is None:
            return 0
        return self._bridge.emit(signal, *args, **kwargs)

    def connect(self, signal: str, handler: Callable) -> Optional[Connection]:
        if self._bridge is None:
            return None
        return self._bridge.connect(signal, handler)
