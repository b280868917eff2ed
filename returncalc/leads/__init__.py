from .builder import build_lead

__all__ = ["build_lead"]
