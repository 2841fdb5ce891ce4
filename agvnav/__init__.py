"""Grid path planning and step-by-step motion control for a marker-guided AGV."""

__version__ = "0.1.0"
__all__ = ["astar", "encoder", "qrlink", "vehicle", "remote", "controller"]