"""Unit tests for core/extract/steps.py"""

from blockmark.core.extract.steps import parse_steps, strip_item


def _steps(body: str):
    return parse_steps(body.splitlines())


def test_strip_item_prefix():
    """Only a '- ' prefix is stripped; other lines pass through."""
    assert strip_item("- Train") == "Train"
    assert strip_item("-Train") == "-Train"
    assert strip_item("Train") == "Train"


def test_single_line_is_title_only_step():
    """One non-blank line parses to one step with that title and no details."""
    steps = _steps("Step One")
    assert len(steps) == 1
    assert steps[0].title == "Step One"
    assert steps[0].details == []
    assert steps[0].tips is None
    assert steps[0].notes is None


def test_details_and_tips():
    """Dash lines become details; [tips] lines go to the step's tips only."""
    steps = _steps("Step One\n- d1\n[tips]\n- t1\n[/tips]")
    assert steps[0].title == "Step One"
    assert steps[0].details == ["d1"]
    assert steps[0].tips == ["t1"]
    assert steps[0].notes is None


def test_plain_lines_accepted_as_items():
    """Unprefixed lines inside a step are accepted verbatim into the active list."""
    steps = _steps("Step\nplain detail\n[notes]\nplain note\n[/notes]")
    assert steps[0].details == ["plain detail"]
    assert steps[0].notes == ["plain note"]


def test_blank_line_separates_steps():
    """A blank line closes the open step; the next line starts a new one."""
    steps = _steps("A\n- a1\n\nB\n- b1")
    assert [s.title for s in steps] == ["A", "B"]
    assert [s.details for s in steps] == [["a1"], ["b1"]]
    assert [s.id for s in steps] == ["step-1", "step-2"]


def test_consecutive_blank_lines_do_not_create_steps():
    """Extra blank lines between steps are harmless."""
    assert len(_steps("A\n\n\n\nB")) == 2


def test_dash_line_outside_step_is_a_title():
    """In the no-step state the full line, dash included, becomes the title."""
    assert _steps("- Not a detail")[0].title == "- Not a detail"


def test_empty_subsection_allocates_list():
    """Opening a sub-section allocates its list even if nothing is added."""
    steps = _steps("A\n[tips]\n[/tips]")
    assert steps[0].tips == []
    assert steps[0].notes is None


def test_subsection_before_title_opens_untitled_step():
    """A marker seen outside a step opens an untitled step."""
    steps = _steps("[tips]\n- t\n[/tips]\n- d")
    assert steps[0].title == ""
    assert steps[0].tips == ["t"]
    assert steps[0].details == ["d"]


def test_items_after_subsection_close_return_to_details():
    """Closing a sub-section routes later lines back to details."""
    steps = _steps("A\n[notes]\n- n\n[/notes]\n- d")
    assert steps[0].notes == ["n"]
    assert steps[0].details == ["d"]


def test_switching_subsections():
    """Opening [notes] while [tips] is open switches the target list."""
    steps = _steps("A\n[tips]\n- t\n[notes]\n- n\n[/notes]")
    assert steps[0].tips == ["t"]
    assert steps[0].notes == ["n"]


def test_stray_close_marker_ignored():
    """A closing marker with no open step or section is ignored."""
    steps = _steps("[/tips]\nA\n[/notes]\n- d")
    assert len(steps) == 1
    assert steps[0].details == ["d"]


def test_empty_body():
    """No lines means no steps."""
    assert parse_steps([]) == []
