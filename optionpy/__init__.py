from .option import (
    Option,
    Some,
    NONE,
    some,
    none,
    from_value,
    from_nullable,
    filter_value,
)
from .seq import (
    OptionSeq,
    map_each,
    flat_map,
    filter_each,
    filter_values,
    first_or_none,
    for_each,
    to_list,
    to_iterable,
    contains,
)
from .errors import ValueAbsent
from .logger import ConsoleLogger, current_logger, set_logger, reset_logger
