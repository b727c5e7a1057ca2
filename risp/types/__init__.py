from risp.types.symbol import Symbol
from risp.types.environment import Environment
from risp.types.closure import Closure
from risp.types.document import Document

__all__ = ["Symbol", "Environment", "Closure", "Document"]
