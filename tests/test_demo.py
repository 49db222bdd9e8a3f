import io
import re

import pytest

from bintree.demo import main, run_scenario


def _output(number):
    buffer = io.StringIO()
    run_scenario(number, buffer)
    return buffer.getvalue()


def _report_lines(number):
    return [line for line in _output(number).splitlines() if ":" in line]


def _trailing_numbers(number, count):
    lines = _output(number).splitlines()
    return [int(line) for line in lines[-count:]]


def test_create_draws_all_seven_labels():
    text = _output(0)
    labels = re.findall(r"\((\d{3})\)", text)
    assert sorted(int(label) for label in labels) == [6, 12, 16, 98, 256, 402, 512]


def test_insert_scenarios_share_first_drawing():
    first_left = _output(1).split("\n\n")[0]
    first_right = _output(2).split("\n\n")[0]
    assert first_left == first_right
    assert "(098)" in first_left


def test_delete_scenario_draws_tree_of_insert_right():
    after_insert = _output(2).split("\n\n", 1)[1]
    assert _output(3) == after_insert


@pytest.mark.parametrize("number", [4, 5, 9, 10, 11, 12, 13])
def test_reports_begin_with_shared_tree(number):
    assert _output(number).startswith(_output(3))


def test_leaf_report_values_are_flags():
    lines = _report_lines(4)
    assert len(lines) == 3
    for line in lines:
        assert re.fullmatch(r"Is \d+ a leaf: [01]", line)


def test_traversals_visit_same_values():
    pre = _trailing_numbers(6, 7)
    ino = _trailing_numbers(7, 7)
    post = _trailing_numbers(8, 7)
    assert sorted(pre) == sorted(ino) == sorted(post)


def test_inorder_of_search_tree_is_sorted():
    values = _trailing_numbers(7, 7)
    assert values == sorted(values)


def test_preorder_starts_and_postorder_ends_with_root():
    assert _trailing_numbers(6, 7)[0] == 98
    assert _trailing_numbers(8, 7)[-1] == 98


def _reported_values(number):
    return [int(line.rsplit(": ", 1)[1]) for line in _report_lines(number)]


def test_height_decreases_down_the_tree():
    values = _reported_values(9)
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == len(values)


def test_depth_increases_down_the_tree():
    values = _reported_values(10)
    assert values == sorted(values)
    assert values[0] == 0


def test_size_of_root_matches_drawn_labels():
    drawing = _output(3)
    sizes = _reported_values(11)
    assert sizes[0] == drawing.count("(")
    assert sizes == sorted(sizes, reverse=True)


def test_balance_lines_are_signed():
    lines = _report_lines(14)
    assert len(lines) == 3
    for line in lines:
        assert re.fullmatch(r"Balance of \d+: [+-]\d+", line)


def test_perfect_scenario_reports_three_results():
    values = [int(line.split(": ")[1]) for line in _output(16).splitlines() if line.startswith("Perfect")]
    assert values == [1, 0, 0]


def test_sibling_of_root_is_null():
    lines = _report_lines(17)
    assert len(lines) == 4
    assert lines[-1] == "Sibling of 98: (nil)"


def test_uncle_of_root_child_is_null():
    lines = _report_lines(18)
    assert len(lines) == 3
    assert lines[-1].endswith("(nil)")


def test_unknown_scenario_raises():
    with pytest.raises(ValueError):
        run_scenario(19, io.StringIO())


def test_main_single_scenario_matches_run_scenario(capsys):
    assert main(["4"]) == 0
    assert capsys.readouterr().out == _output(4)


def test_main_without_arguments_runs_every_scenario(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Uncle of" in out
    assert out.startswith(_output(0))


def test_main_rejects_unknown_number(capsys):
    with pytest.raises(SystemExit):
        main(["42"])