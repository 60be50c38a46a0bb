r"""
Statistical distributions for the distrkit package.

Each distribution lives in its own module and defines vectorized numbafied kernels that take equal-length arrays as
an input and return ``NaN`` wherever a parameter is out of its domain:

1. :func:`nb_dist_pdf(x, *shapes)`
Returns the density (or the probability mass, for discrete distributions)

2. :func:`nb_dist_cdf(x, *shapes)`
Returns the lower-tail cumulative probability :math:`P(X \leq x)`

3. :func:`nb_dist_ppf(p, *shapes)`
Returns the quantile, the inverse of the cdf

4. :func:`nb_dist_logpdf(x, *shapes)`, optional
Returns the log-density without going through :func:`nb_dist_pdf`, so that it does not underflow in the tails

Then these kernels are handed to the drivers of :mod:`distrkit.functions.broadcast`, which provide the four public
functions of the distribution:

1. :func:`ddist(x, *shapes, log=False)`
The density

2. :func:`pdist(q, *shapes, lower_tail=True, log_p=False)`
The cumulative probability, or the upper tail :math:`P(X > q)`

3. :func:`qdist(p, *shapes, lower_tail=True, log_p=False)`
The quantile

4. :func:`rdist(n, *shapes, rng=None)`
`n` random variates, by inverse transform unless the module says otherwise

The public functions accept scalars, sequences or :class:`numpy.ma.MaskedArray` of any length for each argument.
Shorter arguments are recycled, missing values (masked, ``None`` or ``NaN``) give masked outputs and out-of-domain
parameters give ``NaN`` together with a single ``"NaNs produced"`` warning per call.

NOTE: The order of the arguments of these functions follows the ordering convention from left to right: the variate
(or `p`, or `n`), then the shape parameters in the order of the module, then the keyword options.

The continuous distributions also package their kernels into a class that subclasses our own DistrkitContinuous, a
subclass of scipy's rv_continuous, giving access to the rest of scipy's API (moments, intervals, fitting...).
"""
