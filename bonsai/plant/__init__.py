from bonsai.plant.branch import BranchType, ConfigError, GrowthConfig, GrowthState, Position
from bonsai.plant.growth import GrowthEngine

__all__ = [
    'BranchType',
    'ConfigError',
    'GrowthConfig',
    'GrowthEngine',
    'GrowthState',
    'Position',
]
