from .base import MoveStrategy
from .same_direction import MoveByRequestsInSameDirection
from .single_request import MoveBySingleRequest

__all__ = ["MoveStrategy", "MoveByRequestsInSameDirection", "MoveBySingleRequest"]
