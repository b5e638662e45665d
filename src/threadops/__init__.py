"""threadops: functional combinators over Option and sequence containers.

Flat imports (preferred):
    from threadops import Some, Nothing, Option
    from threadops import thread_first, fmap, ap, bind, or_else, compose_kleisli

Infix spellings:
    from threadops.operators import tf, fmap, ap, bind, alt
"""

# Combinators
from threadops.combinators import (
    ap,
    bind,
    bind_flip,
    compose,
    compose_kleisli,
    field,
    fmap,
    identity,
    or_else,
    thread,
    thread_as,
    thread_first,
    thread_last,
    thread_last_curried,
)

# Configuration
from threadops._config import Config, get_config, init

# Logging
from threadops._logging import configure_logging, get_logger, reset_logging

# Option types
from threadops.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    from_optional,
)

# Typeclass
from threadops.typeclass import NoInstanceError, TypeClass, typeclass

__all__ = [
    # Configuration
    'Config',
    # Typeclass
    'NoInstanceError',
    # Option types
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'TypeClass',
    # Combinators
    'ap',
    'bind',
    'bind_flip',
    'compose',
    'compose_kleisli',
    # Logging
    'configure_logging',
    'field',
    'fmap',
    'from_optional',
    'get_config',
    'get_logger',
    'identity',
    'init',
    'or_else',
    'reset_logging',
    'thread',
    'thread_as',
    'thread_first',
    'thread_last',
    'thread_last_curried',
    'typeclass',
]
