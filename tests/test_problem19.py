import pytest

from ecpuzzles.problem19 import Solution, main

SAMPLE = [
    "root = 300",
    "lo = 100",
    "mid = 200",
    "hi = 400",
    "",
    "a = 200",
    "b = 100",
]


def test_parse_reads_pairs():
    solution = Solution.parse(SAMPLE)
    assert solution.first == (200, "a")
    assert solution.second == (100, "b")
    assert solution.tree.root.value == "root"


def test_parse_accepts_line_endings():
    solution = Solution.parse([line + "\n" for line in SAMPLE])
    assert solution.part2() == "root-hi"


def test_part1_sample():
    assert Solution.parse(SAMPLE).part1() == 1500


def test_part1_single_node():
    solution = Solution.parse(["solo = 7", "", "x = 7", "y = 7"])
    assert solution.part1() == 7


def test_part2_path_towards_target():
    assert Solution.parse(SAMPLE).part2() == "root-hi"


def test_part2_stops_at_target_node():
    lines = ["top = 100", "goal = 500000", "past = 600000", "", "x = 1", "y = 2"]
    assert Solution.parse(lines).part2() == "top-goal"


def test_part3_common_ancestor_below_root():
    assert Solution.parse(SAMPLE).part3() == "lo"


def test_part3_diverging_at_root():
    lines = SAMPLE[:5] + ["a = 100", "b = 400"]
    assert Solution.parse(lines).part3() == "root"


def test_part3_empty_tree_raises():
    solution = Solution.parse(["", "a = 1", "b = 2"])
    with pytest.raises(ValueError):
        solution.part3()


def test_parse_duplicate_key_raises():
    with pytest.raises(ValueError):
        Solution.parse(["a = 1", "b = 1", "", "x = 1", "y = 2"])


def test_parse_missing_pairs_raises():
    with pytest.raises(ValueError):
        Solution.parse(["a = 1", "", "x = 1"])


def test_parse_malformed_line_raises():
    with pytest.raises(ValueError):
        Solution.parse(["justone", "", "x = 1", "y = 2"])


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(SAMPLE) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["1500", "root-hi", "lo"]


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main([str(missing)]) == 2
    assert "Cannot open" in capsys.readouterr().err


def test_main_bad_input(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("x = 1\n", encoding="utf-8")
    assert main([str(path)]) == 3
    assert "Error reading" in capsys.readouterr().err