"""
'    #      ###   #####  #   #   ####  #####   ###
'    #     #   #     #    # #   #      #      #   #
'    #     #####    #      #     ###   ####   #   #
'    #     #   #   #       #        #  #      #  ##
'    ##### #   #  #####    #    ####   #####   ####
"""

import logging

# expose the protocol
from .sequence import LazySequence
from .types import (
    StepResult,
    DONE,
    item,
    LazySequenceError,
    EmptySequenceError,
    InvalidStepError
)

# expose the engine
from .core import shift, reduce

# expose the factory functions
from .factories import (
    sequence,
    arange,
    recursive,
    empty,
    iterator
)

# expose the aggregations and transformers
from .extensions.aggregate import every, some, take, count, min, max, sort
from .extensions.transform import map, filter, concatenate, unshift

# silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "LazySequence",
    "StepResult",
    "DONE",
    "item",
    "LazySequenceError",
    "EmptySequenceError",
    "InvalidStepError",
    "shift",
    "reduce",
    "sequence",
    "arange",
    "recursive",
    "empty",
    "iterator",
    "every",
    "some",
    "take",
    "count",
    "min",
    "max",
    "sort",
    "map",
    "filter",
    "concatenate",
    "unshift"
]
