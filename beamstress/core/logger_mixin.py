import logging
from typing import Any, Mapping, Sequence

import numpy as np
from tabulate import tabulate


class LoggerMixin:
    """
    A mixin class providing a configurable logger to any subclass.

    Every subclass gets its own logger named after module and class. In
    normal mode only warnings and errors are emitted (to a
    :class:`logging.NullHandler` unless the application configured more);
    with ``debug=True`` a stream handler is attached and the level is lowered
    to DEBUG.

    Parameters
    ----------
    *args : Any
        Positional arguments passed to the parent class (if any).
    debug : bool, optional
        Enables debug-level logging output if True. Default is False.
    **kwargs : Any
        Additional keyword arguments passed to the parent class (if any).

    Attributes
    ----------
    logger : logging.Logger
        A logger instance configured for the specific subclass.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        self._logger.propagate = False

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        self._logger.setLevel(logging.WARNING)

        if debug:
            # only one stream handler per class logger
            if not any(isinstance(h, logging.StreamHandler)
                       for h in self._logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(self._formatter)
                self._logger.addHandler(sh)
            self._logger.setLevel(logging.DEBUG)

        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )

    @property
    def logger(self) -> logging.Logger:
        """
        Returns the logger instance associated with this object.

        Returns
        -------
        logging.Logger
            The configured logger.
        """
        if not hasattr(self, "_logger"):
            LoggerMixin.__init__(self)
        return self._logger

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        has_debug = "debug" in getattr(cls, "__annotations__", {})

        # Dataclasses: set up the logger right before __post_init__ runs.
        orig_post = getattr(cls, "__post_init__", None)
        if orig_post is not None and has_debug:
            def wrapped_post(self, *a, **k):
                LoggerMixin.__init__(self, debug=getattr(self, "debug", False))
                return orig_post(self, *a, **k)

            cls.__post_init__ = wrapped_post
            return

        # Plain classes with their own __init__.
        orig_init = getattr(cls, "__init__", None)
        if orig_init is not LoggerMixin.__init__:

            def wrapped_init(self, *a, **k):
                LoggerMixin.__init__(self, debug=k.get("debug", False))
                if orig_init is not None:
                    return orig_init(self, *a, **k)

            cls.__init__ = wrapped_init


def table_properties(properties: Mapping[str, float],
                     units: Mapping[str, str], decimals: int = 6):
    """Render named scalar quantities as a two column grid table.

    Parameters
    ----------
    properties : Mapping[str, float]
        Quantity name to value.
    units : Mapping[str, str]
        Quantity name to unit label. Missing names get an empty unit.
    decimals : int, default=6
        Number of significant digits in the value column.

    Returns
    -------
    str
        The rendered table.
    """
    data = [
        [name, value, units.get(name, '')]
        for name, value in properties.items()
    ]
    return tabulate(data, headers=['Quantity', 'Value', 'Unit'],
                    tablefmt="grid", floatfmt=f".{decimals}g")


def table_distribution(y_values: Sequence[float],
                       columns: Mapping[str, Sequence[float]],
                       decimals: int = 6):
    """Render sampled values over the ordinate as a grid table.

    Every entry of ``columns`` becomes one column next to the ordinate.
    """
    y_values = np.asarray(y_values, dtype=float)
    header = ['y (m)'] + list(columns)
    stacked = [np.asarray(c, dtype=float) for c in columns.values()]

    data = []
    for idx, y in enumerate(y_values):
        data.append([y] + [c[idx] for c in stacked])

    return tabulate(data, headers=header, tablefmt="grid",
                    floatfmt=f".{decimals}g")
