from . import checks
from . import complex_log
from . import dilog
from . import hexalog
from . import pentalog
from . import polylog_wrappers
from . import series
from . import tetralog
from . import trilog
from . import validation

from .complex_log import cln, cln1p
from .dilog import li2, li2_complex, li2_real
from .hexalog import li6
from .pentalog import li5
from .polylog_wrappers import ORDERS, polylog
from .tetralog import li4
from .trilog import li3

__version__ = "0.1.0"

__all__ = [
    "checks",
    "complex_log",
    "dilog",
    "hexalog",
    "pentalog",
    "polylog_wrappers",
    "series",
    "tetralog",
    "trilog",
    "validation",
    "cln",
    "cln1p",
    "li2",
    "li2_complex",
    "li2_real",
    "li3",
    "li4",
    "li5",
    "li6",
    "ORDERS",
    "polylog",
]
