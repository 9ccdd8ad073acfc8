from .fs import ContentFramerProtocol, OutputWriterProtocol, PathMatcherProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .presenter import PresenterProtocol

__all__ = [
    'ContentFramerProtocol',
    'OutputWriterProtocol',
    'PathMatcherProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'PresenterProtocol',
]
