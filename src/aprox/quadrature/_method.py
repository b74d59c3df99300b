"""Quadrature rule selectors."""

import enum
from typing import Union

from aprox.quadrature._exceptions import UnknownMethodError


class Method(enum.Enum):
    """
    Quadrature rule used to weight the grid samples.

    Each member's value is the one-letter selector accepted by
    :func:`~aprox.quadrature.approximate`.

    Examples
    --------
    >>> Method.parse("t")
    <Method.TRAPEZOIDAL: 't'>
    >>> Method.parse("simpson")
    <Method.SIMPSON: 's'>
    """

    MIDPOINT = "m"
    LEFT = "l"
    RIGHT = "r"
    TRAPEZOIDAL = "t"
    SIMPSON = "s"

    @classmethod
    def parse(cls, method: Union["Method", str]) -> "Method":
        """
        Resolve a selector to a ``Method``.

        Parameters
        ----------
        method : Method or str
            A ``Method``, a one-letter selector (``"m"``, ``"l"``, ``"r"``,
            ``"t"``, ``"s"``) or a rule name such as ``"midpoint"``. Strings
            are case-insensitive.

        Returns
        -------
        Method

        Raises
        ------
        UnknownMethodError
            If ``method`` matches none of the rules.
        """
        if isinstance(method, cls):
            return method

        if isinstance(method, str):
            key = method.strip().lower()

            for member in cls:
                if key == member.value:
                    return member

            if key in _NAMES:
                return _NAMES[key]

        raise UnknownMethodError(method)


_NAMES = {
    "midpoint": Method.MIDPOINT,
    "left": Method.LEFT,
    "right": Method.RIGHT,
    "trapezoid": Method.TRAPEZOIDAL,
    "trapezoidal": Method.TRAPEZOIDAL,
    "simpson": Method.SIMPSON,
}
