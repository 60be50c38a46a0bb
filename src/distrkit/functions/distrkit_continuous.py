"""
Subclasses of scipy.stat's rv_continuous, allows for freezing of distrkit numba-fied distributions for faster functions
Example:

>>> from distrkit.functions.lomax import lomax
>>> dist = lomax(1, 2)
>>> dist.get_pdf([1, 2, 3]) # a direct call to the faster numbafied kernel
>>> dist.pdf([1, 2, 3]) # a call to the slower scipy method, allows access to other scipy methods like .rvs
>>> dist.rvs(100) # Can access scipy methods!

NOTE: the dist.pdf method goes through scipy's argument checking, and the dist.get_pdf method calls the kernel directly.
Unlike the d/p/q/r functions, the get_* methods do not mask missing values nor report invalid parameters.
"""

import numpy as np
from scipy.stats._distn_infrastructure import rv_continuous, rv_continuous_frozen


class NumbaFrozen(rv_continuous_frozen):
    r"""
    Essentially, an overloading of the definition of rv_continuous_frozen so that our distrkit class instantiations have
    access to both the scipy methods, as well as the faster distrkit methods (like get_pdf)
    """

    def get_pdf(self, x: np.ndarray) -> np.ndarray:
        r"""
        Direct access to numba-fied pdfs, a fast function

        Returns
        -------
        pdf
        """

        return self.dist.get_pdf(x, *self.args, **self.kwds)

    def get_cdf(self, x: np.ndarray) -> np.ndarray:
        r"""
        Direct access to numba-fied cdfs, a fast function

        Returns
        -------
        cdf
        """

        return self.dist.get_cdf(x, *self.args, **self.kwds)

    def get_ppf(self, q: np.ndarray) -> np.ndarray:
        r"""
        Direct access to numba-fied quantile functions, a fast function

        Returns
        -------
        ppf
        """

        return self.dist.get_ppf(q, *self.args, **self.kwds)

    def required_args(self) -> tuple:
        r"""
        Allow access to the required args of frozen distribution

        Returns
        -------
        Required shape parameters
        """

        return self.dist.required_args()


class DistrkitContinuous(rv_continuous):
    r"""
    Subclass rv_continuous so that the distribution methods delegate to the numba kernels of a distrkit module, and
    modify the instantiation so that we call an overloaded version of rv_continuous_frozen that has direct access to them.

    Subclasses set the class attributes ``_pdf_kernel``, ``_cdf_kernel`` and ``_ppf_kernel`` (and optionally
    ``_logpdf_kernel``) to elementwise kernels taking ``(x, *shapes)``, and list the shape names in ``_required_args``.
    scipy hands the kernels arrays that are already broadcast against each other and that passed ``_argcheck``.
    The shape parameters keep loc=0 and scale=1 as their identity, like any scipy distribution.
    """

    _pdf_kernel = None
    _cdf_kernel = None
    _ppf_kernel = None
    _logpdf_kernel = None
    _required_args: tuple = ()

    def _pdf(self, x, *args):
        return type(self)._pdf_kernel(x, *args)

    def _logpdf(self, x, *args):
        if type(self)._logpdf_kernel is None:
            return super()._logpdf(x, *args)
        return type(self)._logpdf_kernel(x, *args)

    def _cdf(self, x, *args):
        return type(self)._cdf_kernel(x, *args)

    def _ppf(self, q, *args):
        return type(self)._ppf_kernel(q, *args)

    def _kernel_args(self, x, args):
        arrays = np.broadcast_arrays(np.asarray(x, dtype=np.float64), *args)
        return [np.asarray(a, dtype=np.float64) for a in arrays]

    def get_pdf(self, x: np.ndarray, *args) -> np.ndarray:
        return self._pdf(*self._kernel_args(x, args))

    def get_cdf(self, x: np.ndarray, *args) -> np.ndarray:
        return self._cdf(*self._kernel_args(x, args))

    def get_ppf(self, q: np.ndarray, *args) -> np.ndarray:
        return self._ppf(*self._kernel_args(q, args))

    def required_args(self) -> tuple:
        return self._required_args

    def __call__(self, *args, **kwds):
        return NumbaFrozen(self, *args, **kwds)
