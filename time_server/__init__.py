from time_server.app import create_app
from time_server.clock import TimeSnapshot, current_snapshot

__all__ = ["create_app", "TimeSnapshot", "current_snapshot"]
