import pytest

from probetable.boggle import boggle, format_board, gen_board, main, parse_dict


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("CAT COG\nCA AT\n  DOG\n")
    return path


BOARD = [
    ["C", "A", "T"],
    ["X", "O", "X"],
    ["X", "X", "G"],
]


def test_gen_board_shape():
    board = gen_board(5, 3)
    assert len(board) == 5
    assert all(len(row) == 5 for row in board)


def test_gen_board_deterministic():
    first = gen_board(6, 10)
    second = gen_board(6, 10)
    assert len(first) == 6
    assert first == second


def test_gen_board_default_seed_values():
    # Seed 5489 yields 3499211612, 581869302, 3890346734, 3586334585.
    assert gen_board(2, 5489) == [["W", "T"], ["O", "T"]]


def test_gen_board_uppercase_letters():
    board = gen_board(10, 7)
    assert all(len(cell) == 1 and cell.isupper() for row in board for cell in row)


def test_gen_board_seeds_differ():
    assert gen_board(8, 1) != gen_board(8, 2)


def test_gen_board_empty():
    assert gen_board(0, 1) == []


def test_gen_board_negative_size():
    with pytest.raises(ValueError):
        gen_board(-1, 1)


def test_format_board():
    assert format_board([["A", "B"], ["C", "D"]]) == " A B\n C D\n"


def test_parse_dict(dict_file):
    words, prefixes = parse_dict(dict_file)
    assert words == {"CAT", "COG", "CA", "AT", "DOG"}
    assert {"", "C", "CA", "CO", "A", "D", "DO"} == prefixes


def test_parse_dict_single_letter_word(tmp_path):
    path = tmp_path / "w.txt"
    path.write_text("A\n")
    words, prefixes = parse_dict(path)
    assert words == {"A"}
    assert prefixes == {""}


def test_parse_dict_missing_file(tmp_path):
    with pytest.raises(ValueError, match="unable to open dictionary file"):
        parse_dict(tmp_path / "missing.txt")


def test_boggle_keeps_longest_words(dict_file):
    words, prefixes = parse_dict(dict_file)
    assert boggle(words, prefixes, BOARD) == {"CAT", "COG", "AT"}


def test_boggle_no_matches():
    assert boggle({"ZZZ"}, {"", "Z", "ZZ"}, BOARD) == set()


def test_boggle_results_subset_of_dictionary(dict_file):
    words, prefixes = parse_dict(dict_file)
    board = gen_board(12, 5)
    assert boggle(words, prefixes, board) <= words


def test_main_output(dict_file, capsys):
    assert main(["3", "4", str(dict_file)]) == 0
    out = capsys.readouterr().out
    board = gen_board(3, 4)
    words, prefixes = parse_dict(dict_file)
    found = boggle(words, prefixes, board)
    expected = (
        format_board(board)
        + f"Found {len(found)} words:\n"
        + ", ".join(sorted(found))
        + "\n"
    )
    assert out == expected


def test_main_usage(capsys):
    assert main(["3", "4"]) == 1
    assert "Usage: boggle-driver" in capsys.readouterr().out