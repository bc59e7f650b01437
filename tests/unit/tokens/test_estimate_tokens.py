import pytest

from oai_kit.tokens import estimate_tokens


class TestEstimateTokens:
    def test_empty_string_is_zero(self) -> None:
        assert estimate_tokens("") == 0

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("a", 0),
            ("Hello world", 4),
            ("Number 1 is one, number 2 is two and number 3 is three.", 24),
            # Non-ASCII letters are not word characters
            ("é", 1),
            ("第一个是一，第二个是二，第三个是三。", 33),
        ],
    )
    def test_known_values(self, text: str, expected: int) -> None:
        assert estimate_tokens(text) == expected

    def test_is_pure(self) -> None:
        text = "Bonjour le monde, c'est si beau!"
        assert len({estimate_tokens(text) for _ in range(5)}) == 1

    def test_does_not_raise_on_lone_surrogate(self) -> None:
        assert estimate_tokens("a\ud800b") >= 0
