# AbleScript front end and value model
__version__ = "0.1.0"

from .errors import AbleError, ErrorKind
from .parser import Parser, parse
from .types import Value, ValueType, Abool, BfFunctio, AbleFunctio
from .variables import Variable, Environment
