def test_public_imports() -> None:
    # A lightweight contract test: keep the most common imports stable.
    import numcore

    assert hasattr(numcore, "__version__")

    from numcore import FlVector, factorize, is_prime, solve_chinese  # noqa: F401
    from numcore.flonum import flvector_copy_range, for_flvector  # noqa: F401
    from numcore.number_theory import ModularContext, SieveOracle  # noqa: F401
