"""Property-based testing with shrinkable generator combinators."""

from .interface import *
from .combinators import *
from .implementations import *
from .generator import *
from .trial import *
from .checker import *
