"""Trail state: the point buffer and the heading."""
from .trails import Point, TrailBuffer
from .heading import HeadingState, HeadingController

__all__ = [
    'Point', 'TrailBuffer',
    'HeadingState', 'HeadingController',
]
