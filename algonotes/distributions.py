"""Beta and Dirichlet distributions built on gamma variates."""

from __future__ import annotations

import random
import re
from collections.abc import Sequence
from dataclasses import dataclass

_DEFAULT_ALPHA = 1.0
_BETA_TEXT = re.compile(r"~Beta\(\s*([^,\s]+),\s*([^)\s]+)\)")


def _check_shape(value: float) -> float:
    value = float(value)
    if not value > 0.0:
        raise ValueError("gamma shape parameters must be positive")
    return value


@dataclass(frozen=True)
class BetaParams:
    """Shape parameters of a beta distribution."""

    a: float = _DEFAULT_ALPHA
    b: float = _DEFAULT_ALPHA


class BetaDistribution:
    """Beta(a, b) sampled as X / (X + Y) with X ~ Gamma(a, 1), Y ~ Gamma(b, 1)."""

    min = 0.0
    max = 1.0

    def __init__(self, a: float = _DEFAULT_ALPHA, b: float = _DEFAULT_ALPHA) -> None:
        self._alpha = _check_shape(a)
        self._beta = _check_shape(b)

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def beta(self) -> float:
        return self._beta

    @property
    def params(self) -> BetaParams:
        return BetaParams(self._alpha, self._beta)

    def set_params(self, params: BetaParams) -> None:
        """Replace both shape parameters."""
        alpha = _check_shape(params.a)
        beta = _check_shape(params.b)
        self._alpha, self._beta = alpha, beta

    def reset(self) -> None:
        """Nothing is cached between draws, so there is nothing to reset."""

    def __call__(self, rng: random.Random, params: BetaParams | None = None) -> float:
        """Draw one value in [0, 1]; given ``params`` replace the current ones first."""
        if params is not None:
            self.set_params(params)
        x = rng.gammavariate(self._alpha, 1.0)
        y = rng.gammavariate(self._beta, 1.0)
        return x / (x + y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BetaDistribution):
            return NotImplemented
        return self._alpha == other._alpha and self._beta == other._beta

    def __hash__(self) -> int:
        return hash((self._alpha, self._beta))

    def __str__(self) -> str:
        return f"~Beta({self._alpha:g},{self._beta:g})"

    def __repr__(self) -> str:
        return f"BetaDistribution({self._alpha!r}, {self._beta!r})"

    @classmethod
    def parse(cls, text: str) -> BetaDistribution:
        """Read a distribution written as ``~Beta(a,b)``."""
        match = _BETA_TEXT.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"not a beta distribution: {text!r}")
        try:
            a, b = float(match.group(1)), float(match.group(2))
        except ValueError as exc:
            raise ValueError(f"not a beta distribution: {text!r}") from exc
        return cls(a, b)


class DirichletDistribution:
    """Dirichlet distribution over a fixed number of components.

    ``alphas`` is either a sequence of concentration parameters or an integer
    size, in which case every parameter is 1.
    """

    min = 0.0
    max = 1.0

    def __init__(self, alphas: int | Sequence[float]) -> None:
        if isinstance(alphas, int) and not isinstance(alphas, bool):
            if alphas <= 0:
                raise ValueError("dirichlet distribution needs at least one component")
            self._alphas = (_DEFAULT_ALPHA,) * alphas
        else:
            values = tuple(_check_shape(a) for a in alphas)
            if not values:
                raise ValueError("dirichlet distribution needs at least one component")
            self._alphas = values

    @property
    def size(self) -> int:
        return len(self._alphas)

    @property
    def alphas(self) -> tuple[float, ...]:
        return self._alphas

    def set_params(self, alphas: Sequence[float]) -> None:
        """Replace the concentration parameters; the count must not change."""
        values = tuple(_check_shape(a) for a in alphas)
        if len(values) != len(self._alphas):
            raise ValueError(
                f"expected {len(self._alphas)} parameters, got {len(values)}"
            )
        self._alphas = values

    def __call__(
        self, rng: random.Random, alphas: Sequence[float] | None = None
    ) -> list[float]:
        """Draw one point of the simplex; given ``alphas`` replace the current ones first."""
        if alphas is not None:
            self.set_params(alphas)
        draws = [rng.gammavariate(a, 1.0) for a in self._alphas]
        total = sum(draws)
        return [d / total for d in draws]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirichletDistribution):
            return NotImplemented
        return self._alphas == other._alphas

    def __hash__(self) -> int:
        return hash(self._alphas)

    def __repr__(self) -> str:
        return f"DirichletDistribution({list(self._alphas)!r})"