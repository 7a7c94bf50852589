"""
================================================================================
Test Data Providers
================================================================================

Fixed parameter sets for parametrized UI tests.

Providers return lists of tuples ready for `pytest.mark.parametrize` or
`metafunc.parametrize`. The credential provider is keyed by environment and
refuses unknown environments instead of returning an empty set, so a typo in
the configured environment stops collection.

================================================================================
"""

from typing import Dict, List, Tuple


class UnsupportedEnvironmentError(RuntimeError):
    """Raised when no test data exists for the requested environment."""
    pass


# Environment-specific accounts
CREDENTIALS_BY_ENVIRONMENT: Dict[str, List[Tuple[str, str]]] = {
    "dev": [
        ("dev_user1", "dev_pass1"),
        ("dev_user2", "dev_pass2"),
    ],
    "qa": [
        ("qa_user_A", "qa_pass_A"),
        ("qa_user_B", "qa_pass_B"),
    ],
    "prod": [
        ("prod_user_X", "prod_pass_X"),
    ],
}


def product_to_add() -> List[Tuple[str]]:
    """Products added to the cart by the end-to-end journey."""
    return [
        ("Sauce Labs Backpack",),
    ]


def user_credentials(environment: str) -> List[Tuple[str, str]]:
    """
    Return (username, password) pairs for an environment.

    Args:
        environment: Environment name, case-insensitive

    Returns:
        List of credential tuples

    Raises:
        UnsupportedEnvironmentError: No accounts are defined for the environment
    """
    try:
        return list(CREDENTIALS_BY_ENVIRONMENT[environment.lower()])
    except KeyError:
        raise UnsupportedEnvironmentError(f"Unsupported environment: {environment}") from None


__all__ = [
    "UnsupportedEnvironmentError",
    "product_to_add",
    "user_credentials",
]
