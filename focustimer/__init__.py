"""Focus Timer - Pomodoro sessions with activity tracking"""

__version__ = "0.1.0"
