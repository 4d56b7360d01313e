from .atr import AtrCalculator
from .qplusplus import QPlusPlusCalculator
from .scp import ScpCalculator

__all__ = ["AtrCalculator", "QPlusPlusCalculator", "ScpCalculator"]
