"""
distrkit: density, distribution, quantile and random-variate functions for a
catalog of closed-form distributions.

Every distribution exposes ``d*`` (density or mass), ``p*`` (cumulative
probability), ``q*`` (quantile) and ``r*`` (sampling) functions that
broadcast their arguments elementwise, see :mod:`distrkit.functions`.

Invalid parameters give NaN together with one ``NaNs produced`` warning per
call on the ``distrkit`` logger. :func:`distrkit.logging.setup` makes these
visible with colored console output.
"""

from ._version import version as __version__
from .functions.discrete_uniform import ddunif, pdunif, qdunif, rdunif
from .functions.discrete_weibull import ddweibull, pdweibull, qdweibull, rdweibull
from .functions.gompertz import dgompertz, pgompertz, qgompertz, rgompertz
from .functions.gumbel import dgumbel, pgumbel, qgumbel, rgumbel
from .functions.kumaraswamy import dkumar, pkumar, qkumar, rkumar
from .functions.lomax import dlomax, plomax, qlomax, rlomax
from .functions.mixture_normal import dmixnorm, pmixnorm, rmixnorm
from .functions.power import dpower, ppower, qpower, rpower
from .functions.truncated_normal import dtnorm, ptnorm, qtnorm, rtnorm

__all__ = [
    "__version__",
    "ddunif",
    "pdunif",
    "qdunif",
    "rdunif",
    "ddweibull",
    "pdweibull",
    "qdweibull",
    "rdweibull",
    "dgompertz",
    "pgompertz",
    "qgompertz",
    "rgompertz",
    "dgumbel",
    "pgumbel",
    "qgumbel",
    "rgumbel",
    "dkumar",
    "pkumar",
    "qkumar",
    "rkumar",
    "dlomax",
    "plomax",
    "qlomax",
    "rlomax",
    "dmixnorm",
    "pmixnorm",
    "rmixnorm",
    "dpower",
    "ppower",
    "qpower",
    "rpower",
    "dtnorm",
    "ptnorm",
    "qtnorm",
    "rtnorm",
]
