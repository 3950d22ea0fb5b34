from kubetin.help import DESC_WIDTH, HELP_GROUPS, KEY_WIDTH, help_lines


def test_title_and_footer():
    lines = help_lines()
    assert lines[0] == " kubetin · keybindings "
    assert lines[-1] == " press ? or Esc to close"


def test_every_group_title_present_once():
    lines = help_lines()
    for group in HELP_GROUPS:
        assert lines.count(" " + group.title) == 1


def test_every_key_starts_a_line():
    lines = help_lines()
    for group in HELP_GROUPS:
        for key, _ in group.bindings:
            assert any(line.startswith((" " + key).ljust(KEY_WIDTH) + " ") for line in lines)


def test_binding_lines_fit_width():
    lines = help_lines()
    bound = set()
    for group in HELP_GROUPS:
        for key, _ in group.bindings:
            bound.add((" " + key).ljust(KEY_WIDTH))
    for line in lines:
        if line[:KEY_WIDTH] in bound:
            assert len(line) <= KEY_WIDTH + 1 + DESC_WIDTH


def test_long_description_words_survive_wrapping():
    text = " ".join(help_lines())
    for word in "action menu (Describe / Logs / Exec / Events / Cordon / Drain / Delete)".split():
        assert word in text


def test_build_line_included_only_when_given():
    with_build = help_lines("v1.2.3 (abc)")
    without = help_lines()
    assert " v1.2.3 (abc)" in with_build
    assert len(with_build) == len(without) + 2
    assert with_build[-1] == without[-1]


def test_group_order_matches_table():
    lines = help_lines()
    positions = [lines.index(" " + g.title) for g in HELP_GROUPS]
    assert positions == sorted(positions)
    assert HELP_GROUPS[0].title == "Move"
    assert HELP_GROUPS[-1].title == "System"