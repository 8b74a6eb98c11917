"""fallible: Option, Result and Try containers for Python 3.13+.

Flat imports (preferred):
    from fallible import Some, Nothing, Ok, Err, Success, Failure
    from fallible import some, of_nullable, ok, err, try_of, attempt, safe

Submodule imports (for module-level helpers such as sequence and traverse):
    from fallible import option, result, try_
    option.sequence([some(1), some(2)])
    result.partition([ok(1), err('x')])
    try_.traverse(['1', '2'], lambda s: try_.of(lambda: int(s)))
"""

from fallible import option, result, try_

# Configuration
from fallible._config import CaptureMode, Config, captured_types, get_config, init, reset

# Logging
from fallible._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Decorators
from fallible.decorators import attempt, safe

# Errors
from fallible.errors import (
    ArgumentError,
    Fault,
    FaultError,
    NotFoundError,
    PredicateError,
)
from fallible.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    none,
    of_nullable,
    some,
)
from fallible.result import (
    Err,
    Ok,
    Result,
    err,
    ok,
)
from fallible.try_ import (
    Failure,
    Success,
    Try,
    failure,
    success,
)
from fallible.try_ import of as try_of
from fallible.try_ import run as try_run

__all__ = [
    # Errors
    'ArgumentError',
    # Configuration
    'CaptureMode',
    'Config',
    # Result types
    'Err',
    # Try types
    'Failure',
    'Fault',
    'FaultError',
    # Option types
    'Nothing',
    'NothingType',
    'NotFoundError',
    'Ok',
    'Option',
    'PredicateError',
    'Result',
    'Some',
    'Success',
    'Try',
    # Logging
    'add_log_hook',
    # Decorators
    'attempt',
    'captured_types',
    'clear_log_hooks',
    'configure_logging',
    # Factories
    'err',
    'failure',
    'get_config',
    'get_logger',
    'init',
    'none',
    'of_nullable',
    'ok',
    # Submodules
    'option',
    'remove_log_hook',
    'reset',
    'result',
    'safe',
    'some',
    'success',
    'try_',
    'try_of',
    'try_run',
]
