"""deptdir — command-driven in-memory department directory."""

__version__ = "0.1.0"
