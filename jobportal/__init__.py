"""Job Portal India: chat relay and job listing service."""

__version__ = "1.0.0"
