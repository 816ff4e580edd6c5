# src/bytesift/registry.py
"""
A user-friendly registry for property tests.

Wraps plain functions whose parameters are bound to generator outputs into
property functions the engine can run, and into zero-argument test functions
the host test runner (pytest) can collect.
"""

import inspect
import logging
from typing import Any, Callable, Dict, Optional

from .api import Counterexample, falsify
from .context import ExecutionContext
from .errors import Falsified
from .generators import Generator
from .settings import Settings

logger = logging.getLogger(__name__)

CONTEXT_PARAM = "ctx"


class PropertyTest:
    """
    A function bound to generators for each of its parameters.

    Calling the instance with an :class:`ExecutionContext` draws every bound
    parameter in signature order (named after the parameter) and then calls
    the function, so it satisfies the property-function contract.

    Args:
        func: The property body.
        generators: Parameter name to generator. A generator is called as
            ``gen(ctx, name=param)``.
        settings: Budgets for this property; process-wide defaults if None.
    """

    def __init__(
        self,
        func: Callable,
        generators: Dict[str, Generator],
        settings: Optional[Settings] = None,
    ):
        self.func = func
        self.generators = generators
        self.settings = settings
        self.wants_context = CONTEXT_PARAM in inspect.signature(func).parameters

    @property
    def name(self) -> str:
        return self.func.__qualname__

    @property
    def key(self) -> str:
        """Module-qualified name; unique across test modules."""
        return f"{self.func.__module__}.{self.func.__qualname__}"

    def __repr__(self):
        return f"PropertyTest({self.name}, params={list(self.generators)})"

    def __call__(self, ctx: ExecutionContext) -> Any:
        kwargs = {param: gen(ctx, name=param) for param, gen in self.generators.items()}
        if self.wants_context:
            kwargs[CONTEXT_PARAM] = ctx
        return self.func(**kwargs)

    def find_counterexample(self) -> Optional[Counterexample]:
        """Search, shrink and replay. None means the property held."""
        return falsify(self, self.settings)

    def check(self) -> None:
        """Raise :class:`Falsified` if a counterexample exists."""
        counterexample = self.find_counterexample()
        if counterexample is None:
            return
        message = f"{self.name} failed.\n{counterexample.describe()}"
        raise Falsified(message, counterexample) from counterexample.error


class PropertyRegistry:
    """
    Collects property tests.

    Example:
        .. code-block:: python

            registry = PropertyRegistry()

            @registry.register(integers, integers)
            def test_addition_commutes(a, b):
                assert a + b == b + a
    """

    def __init__(self):
        self._properties: Dict[str, PropertyTest] = {}

    @property
    def properties(self) -> Dict[str, PropertyTest]:
        """Registered tests keyed by module-qualified name."""
        return dict(self._properties)

    def register(
        self,
        *generators: Generator,
        settings: Optional[Settings] = None,
        **named_generators: Generator,
    ):
        """
        Decorator binding generators to the parameters of a property body.

        Positional generators fill the parameters in signature order, skipping
        one named ``ctx``, which receives the
        :class:`~bytesift.context.ExecutionContext` (handy for ``ctx.check``
        and for drawing more values inside the body). Keyword generators bind
        by parameter name.

        The decorated name becomes a zero-argument function that runs the
        full search and raises :class:`~bytesift.errors.Falsified` on failure.
        The bound :class:`PropertyTest` is available as ``.property_test``.

        Args:
            *generators: Generators for the leading parameters.
            settings: Per-property budgets.
            **named_generators: Generators by parameter name.
        """

        def decorator(func: Callable):
            bound = self._bind(func, generators, named_generators)
            test = PropertyTest(func, bound, settings)
            self._properties[test.key] = test

            # No __wrapped__: pytest must not mistake the bound parameters
            # for fixtures.
            def run_property():
                test.check()

            run_property.__name__ = func.__name__
            run_property.__qualname__ = func.__qualname__
            run_property.__module__ = func.__module__
            run_property.__doc__ = func.__doc__
            run_property.property_test = test
            return run_property

        return decorator

    def _bind(self, func, generators, named_generators) -> Dict[str, Generator]:
        params = [
            p
            for p in inspect.signature(func).parameters
            if p != CONTEXT_PARAM
        ]

        if len(generators) > len(params):
            raise ValueError(
                f"{func.__name__} takes {len(params)} parameters "
                f"but {len(generators)} generators were given"
            )

        bound = dict(zip(params, generators))
        for param, gen in named_generators.items():
            if param not in params:
                raise ValueError(
                    f"Parameter name {param} not found. "
                    f"Parameters of {func.__name__} are: {params}"
                )
            if param in bound:
                raise ValueError(f"Parameter {param} bound twice")
            bound[param] = gen

        missing = [p for p in params if p not in bound]
        if missing:
            raise ValueError(f"No generator for parameters: {missing}")

        # Draw in signature order regardless of how they were bound.
        return {p: bound[p] for p in params}

    def run_all(self) -> Dict[str, Optional[Counterexample]]:
        """Check every registered property, keyed like :attr:`properties`."""
        results = {}
        for name, test in self._properties.items():
            logger.debug("Checking %s", name)
            results[name] = test.find_counterexample()
        return results


default_registry = PropertyRegistry()
