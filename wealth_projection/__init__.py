from .data_model import Assumptions, ConfigurationError, YearSnapshot
from .engine import project

__all__ = ["Assumptions", "ConfigurationError", "YearSnapshot", "project"]
