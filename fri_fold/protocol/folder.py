"""Iterated FRI folding over caller-supplied challenges."""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Union

from fri_fold.errors import FieldMismatchError
from fri_fold.primitives.domain import check_domain
from fri_fold.primitives.field import DEMO_PRIME, FieldLike, lift, prime_field
from fri_fold.primitives.polynomial import Polynomial
from fri_fold.protocol.fri import Domain, FriLayer, next_fri_layer

logger = logging.getLogger(__name__)


# --- Configuration ---

@dataclass
class FoldConfig:
    """Folding parameters."""
    modulus: int = DEMO_PRIME
    max_degree: Optional[int] = None  # stop once degree <= max_degree
    check_domains: bool = False  # reject domains not closed under negation


# --- Folder ---

class FriFolder:
    """Threads (polynomial, domain) through successive FRI rounds.

    Holds configuration only; every call to `layers` starts from the
    arguments it is given.
    """

    def __init__(self, config: Optional[FoldConfig] = None):
        self.config = config if config is not None else FoldConfig()
        self.field = prime_field(self.config.modulus)

    def layers(
        self,
        polynomial: Polynomial,
        domain: Union[Domain, Iterable[FieldLike]],
        betas: Iterable[FieldLike],
    ) -> Iterator[FriLayer]:
        """Yield one FriLayer per beta until betas run out or the degree bound is met."""
        if polynomial.field is not self.field:
            raise FieldMismatchError(
                f"Polynomial is over GF({polynomial.field.order}), folder expects GF({self.field.order})"
            )
        domain = lift(self.field, domain)
        betas = iter(betas)

        n_layers = 0
        while not self._degree_reached(polynomial):
            beta = next(betas, None)
            if beta is None:
                break
            if self.config.check_domains:
                check_domain(domain)

            layer = next_fri_layer(polynomial, domain, beta)
            logger.debug(
                "FRI layer %d: degree %d -> %d, domain %d -> %d",
                n_layers, polynomial.degree, layer.polynomial.degree, len(domain), len(layer.domain),
            )
            yield layer

            polynomial, domain = layer.polynomial, layer.domain
            n_layers += 1

        logger.info("FRI folding stopped after %d layers at degree %d", n_layers, polynomial.degree)

    def fold(
        self,
        polynomial: Polynomial,
        domain: Union[Domain, Iterable[FieldLike]],
        betas: Iterable[FieldLike],
    ) -> List[FriLayer]:
        """Run `layers` to completion."""
        return list(self.layers(polynomial, domain, betas))

    def _degree_reached(self, polynomial: Polynomial) -> bool:
        max_degree = self.config.max_degree
        return max_degree is not None and polynomial.degree <= max_degree
