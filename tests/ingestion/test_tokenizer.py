import pytest

from campaign_analyzer.ingestion.tokenizer import detect_delimiter, split_line, split_lines


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("a;b;c;d,e", ";"),
        ("name,spend,clicks", ","),
        ("name\tspend\tclicks", "\t"),
        ("no delimiters here", ","),
        ("", ","),
        ("a\tb,c", ","),
        ("a;b,c", ","),
        ("a\tb\tc;d;e", ";"),
    ],
)
def test_detect_delimiter(line: str, expected: str) -> None:
    assert detect_delimiter(line) == expected


def test_split_lines_drops_blank_lines_and_handles_crlf() -> None:
    raw = "header\r\n\r\nrow 1\n   \nrow 2\n"

    assert split_lines(raw) == ["header", "row 1", "row 2"]


def test_split_lines_empty_input() -> None:
    assert split_lines("") == []
    assert split_lines("\n\r\n  \n") == []


def test_split_line_keeps_delimiter_inside_quotes() -> None:
    assert split_line('a,"b,c",d', ",") == ["a", "b,c", "d"]


def test_split_line_unescapes_doubled_quotes() -> None:
    assert split_line('a,"b""c",d', ",") == ["a", 'b"c', "d"]


def test_split_line_trims_whitespace_around_fields() -> None:
    assert split_line(' x ; "y" ;z ', ";") == ["x", "y", "z"]


def test_split_line_strips_one_pair_of_remaining_quotes() -> None:
    assert split_line('"""hello"""', ",") == ["hello"]


def test_split_line_keeps_unpaired_leading_quote() -> None:
    assert split_line('"""abc"', ",") == ['"abc']


@pytest.mark.parametrize(
    ("line", "expected_count"),
    [
        ("", 1),
        (",,", 3),
        ('"a,b",c', 2),
        ('a,"b,c,d",e,f', 4),
    ],
)
def test_split_line_field_count_matches_unquoted_delimiters(line: str, expected_count: int) -> None:
    assert len(split_line(line, ",")) == expected_count


@pytest.mark.parametrize(
    ("fields", "delimiter"),
    [
        (["Campaign A", "1234.56", "R$ 10", ""], ";"),
        (["only"], ","),
        ([""], ","),
        (["", "", ""], ","),
        (["Spring sale", "1.250,75", "5000"], "\t"),
        (["a b", "c;d", "e"], ","),
    ],
)
def test_split_line_round_trips_plain_fields(fields: list[str], delimiter: str) -> None:
    assert split_line(delimiter.join(fields), delimiter) == fields


def test_split_line_with_tab_delimiter() -> None:
    assert split_line("Promo\t1,5\t300", "\t") == ["Promo", "1,5", "300"]


def test_unterminated_quote_swallows_rest_of_line() -> None:
    assert split_line('a,"b,c,d', ",") == ["a", "b,c,d"]
