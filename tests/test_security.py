from spoken_normalizer.core.security import TokenVerifier


def test_verifier_without_token_accepts_anything() -> None:
    verifier = TokenVerifier()

    assert verifier.enabled is False
    assert verifier.verify(None) is True
    assert verifier.verify("Bearer whatever") is True


def test_verifier_accepts_matching_bearer_token() -> None:
    assert TokenVerifier("s3cret").verify("Bearer s3cret") is True


def test_verifier_rejects_missing_or_wrong_token() -> None:
    verifier = TokenVerifier("s3cret")

    assert verifier.verify(None) is False
    assert verifier.verify("") is False
    assert verifier.verify("s3cret") is False
    assert verifier.verify("Bearer other") is False
    assert verifier.verify("bearer s3cret") is False
