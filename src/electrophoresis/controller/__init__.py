"""
The CONTROLLER layer drives the model over time.
It owns the Qt timers and exposes the user actions (load, start, pause,
reset, voltage) to the views through Qt Signals.
"""
