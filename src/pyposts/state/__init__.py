"""State/store layer.

This package is the single owner of the local post collection and the
error slot. Everything else (UI code, scripts, tests) reads snapshots
and subscribes to change notifications.
"""
