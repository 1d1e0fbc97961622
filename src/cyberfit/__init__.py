"""CyberFit: local fitness/nutrition data store and aggregation engine."""

from cyberfit.container import AppStore, reduce
from cyberfit.storage import StateStore

__all__ = ["AppStore", "StateStore", "reduce"]
