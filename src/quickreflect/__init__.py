#
# quickreflect
# Name based access to the properties and methods of objects
#
from .Err import (
    Err,
    ArgErr,
    CastErr,
    UnknownSlotErr,
    ReadonlyErr,
    CancelledErr,
    TimeoutErr,
    NotCompleteErr,
)
from .Env import Env
from .Log import Log, LogLevel, LogRec
from .Facet import Facet
from .Slot import Slot
from .Field import Field
from .Method import Method
from .Param import Param
from .Type import Type
from .ObjUtil import ObjUtil
from .FutureStatus import FutureStatus
from .Future import Future, ValueFuture
from .MemberResolver import MemberResolver
from .MethodAccessors import MethodAccessors
from .PropertyValuePair import PropertyValuePair
from .PropertyFacetsPair import PropertyFacetsPair
from .PropertyAccessors import PropertyAccessors
from .AsyncReflection import AsyncReflection

__version__ = "0.1.0"
