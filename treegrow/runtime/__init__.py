"""Interactive runtime: session state, input dispatch, and the main loop."""

from .app import build_app_state, run_app
from .keys import handle_key, handle_mouse
from .loop import RuntimeLoopTiming, run_main_loop
from .state import AppState

__all__ = [
    "AppState",
    "RuntimeLoopTiming",
    "build_app_state",
    "handle_key",
    "handle_mouse",
    "run_app",
    "run_main_loop",
]
