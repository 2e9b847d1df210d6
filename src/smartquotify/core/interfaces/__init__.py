from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .surface import EditableSurfaceProtocol
from .text import TextTransformerProtocol
from .zones import ZonePartitionerProtocol

__all__ = [
    'EditableSurfaceProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'TextTransformerProtocol',
    'ZonePartitionerProtocol',
]
