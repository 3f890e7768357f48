import pytest

from validation import ValidationError, clamp_skip, clamp_take, normalize_url, parse_strict_integer


class TestParseStrictInteger:
    @pytest.mark.parametrize("text, expected", [("0", 0), ("7", 7), ("42", 42), ("007", 7), ("9" * 30, int("9" * 30))])
    def test_digits_parse_to_equal_value(self, text, expected):
        assert parse_strict_integer(text) == expected

    @pytest.mark.parametrize("text", ["", " 1", "1 ", "+1", "-1", "1.0", "1e3", "0x10", "abc", "12a", "١٢"])
    def test_anything_else_is_invalid(self, text):
        assert parse_strict_integer(text) is None


class TestNormalizeUrl:
    def test_bare_domain_gets_https(self):
        assert normalize_url("example.com") == "https://example.com"

    def test_full_url_is_unchanged(self):
        assert normalize_url("https://example.com/a?b=1") == "https://example.com/a?b=1"

    def test_http_scheme_is_kept(self):
        assert normalize_url("http://www.example.org") == "http://www.example.org"

    def test_surrounding_whitespace_is_trimmed(self):
        assert normalize_url("  graphql-yoga.com \n") == "https://graphql-yoga.com"

    def test_bad_domain(self):
        with pytest.raises(ValidationError) as err:
            normalize_url("not a url")
        assert "Invalid domain format." in err.value.message

    def test_bad_url_with_scheme(self):
        with pytest.raises(ValidationError) as err:
            normalize_url("https://not a url")
        assert err.value.message == "Invalid URL format."

    def test_top_level_label_longer_than_six_is_rejected(self):
        with pytest.raises(ValidationError):
            normalize_url("example.toolonglabel")


class TestClamps:
    @pytest.mark.parametrize("value", [0, 51, -5])
    def test_take_out_of_range(self, value):
        with pytest.raises(ValidationError) as err:
            clamp_take(1, 50, value)
        assert str(value) in err.value.message
        assert "1" in err.value.message and "50" in err.value.message

    @pytest.mark.parametrize("value", [1, 30, 50])
    def test_take_in_range(self, value):
        assert clamp_take(1, 50, value) == value

    def test_negative_skip(self):
        with pytest.raises(ValidationError) as err:
            clamp_skip(-1)
        assert "-1" in err.value.message

    def test_zero_skip(self):
        assert clamp_skip(0) == 0
