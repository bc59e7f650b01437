import pytest

from oai_kit.options import (
    OPT_OPENAI_API_KEY,
    Option,
    OptionList,
    OptionNotFoundError,
)


class TestOption:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("abc", "abc"),
            ("", ""),
            (42, "42"),
            (-7, "-7"),
            (1.5, "1.5"),
            (True, "true"),
            (False, "false"),
        ],
    )
    def test_as_string_converts_scalars(self, value: object, expected: str) -> None:
        assert Option("k", value).as_string() == expected  # type: ignore[arg-type]

    def test_as_string_rejects_non_scalar(self) -> None:
        option = Option("k", ["a", "b"])  # type: ignore[arg-type]
        with pytest.raises(OptionNotFoundError, match="unsupported value type"):
            option.as_string()

    def test_option_is_frozen(self) -> None:
        option = Option("k", "v")
        with pytest.raises(AttributeError):
            option.value = "other"  # type: ignore[misc]


class TestOptionList:
    def test_get_string_returns_matching_value(self) -> None:
        opts = OptionList([Option(OPT_OPENAI_API_KEY, "sk-1"), Option("n", 2)])

        assert opts.get_string(OPT_OPENAI_API_KEY) == "sk-1"
        assert opts.get_string("n") == "2"

    def test_get_string_raises_when_absent(self) -> None:
        opts = OptionList([Option("a", "1")])
        with pytest.raises(OptionNotFoundError, match="<b> not found"):
            opts.get_string("b")

    def test_empty_list_raises(self) -> None:
        with pytest.raises(OptionNotFoundError):
            OptionList().get_string("a")

    def test_first_match_wins(self) -> None:
        opts = OptionList([Option("a", "first"), Option("a", "second")])
        assert opts.get_string("a") == "first"

    def test_keys_are_case_sensitive(self) -> None:
        opts = OptionList([Option("Model", "gpt")])
        with pytest.raises(OptionNotFoundError):
            opts.get_string("model")

    def test_values_are_not_trimmed(self) -> None:
        opts = OptionList([Option("a", "  padded ")])
        assert opts.get_string("a") == "  padded "

    def test_lookup_is_deterministic(self) -> None:
        opts = OptionList([Option("a", 1), Option("b", 2)])
        assert [opts.get_string("b") for _ in range(3)] == ["2", "2", "2"]

    def test_sequence_behaviour(self) -> None:
        items = [Option("a", 1), Option("b", 2)]
        opts = OptionList(items)

        assert len(opts) == 2
        assert list(opts) == items
