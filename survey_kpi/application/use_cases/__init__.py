"""Application use cases."""

from .detect_kpis import DetectKpisUseCase, detect_kpis

__all__ = ["DetectKpisUseCase", "detect_kpis"]
