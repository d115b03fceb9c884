"""Protocol - FRI layer folding."""

from fri_fold.protocol.folder import FoldConfig, FriFolder
from fri_fold.protocol.fri import (
    FRI,
    FriLayer,
    fold_polynomial,
    next_domain,
    next_fri_layer,
    next_layer,
)

__all__ = [
    # FRI
    "FRI",
    "FriLayer",
    "fold_polynomial",
    "next_domain",
    "next_layer",
    "next_fri_layer",
    # Folder
    "FoldConfig",
    "FriFolder",
]
