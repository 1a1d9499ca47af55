from dataclasses import dataclass

FUZZY_SCORERS = ("ratio", "partial_ratio", "token_sort_ratio", "token_set_ratio")


@dataclass
class SearchConfig:
    # Resolver acceptance policy
    match_confidence_threshold: float = 0.5

    # Fuzzy fallback (typo tolerance, always below the acceptance threshold)
    enable_fuzzy_matching: bool = False
    fuzzy_threshold: float = 0.75
    fuzzy_scorer: str = "token_sort_ratio"

    # Import reconciliation defaults
    default_sets: int = 3
    default_reps: int = 10
