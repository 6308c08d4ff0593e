from memecli.models import MemeTemplate
from memecli.templates import load_templates

EXPECTED_NAMES = [
    "cider_bottle",
    "cider_glass",
    "cider_barrel",
    "cider_drink",
    "cider_bottle",
    "cider_drink",
    "cider_bottle",
    "brainrot",
    "brainrot_drink",
    "brainrot_skull",
    "brainrot_bottle",
    "cider_drink",
    "cider_glass",
    "cider_barrel",
    "deal_with_it",
    "cat_feature",
    "hello_world",
    "coding_life",
    "cute_cat",
]

TEXT_TEMPLATES = ["deal_with_it", "cat_feature", "hello_world", "coding_life", "cute_cat"]


def _by_name(name: str) -> MemeTemplate:
    return next(t for t in load_templates() if t.name == name)


def test_names_in_catalogue_order():
    assert [t.name for t in load_templates()] == EXPECTED_NAMES


def test_every_placeholder_is_top_and_bottom():
    assert {t.placeholder for t in load_templates()} == {"{{TOP}}\n{{BOTTOM}}"}


def test_every_art_starts_with_newline():
    assert all(t.ascii_art.startswith("\n") for t in load_templates())


def test_bottle_art_ends_with_indented_line():
    templates = load_templates()
    art_templates = templates[: len(EXPECTED_NAMES) - len(TEXT_TEMPLATES)]
    assert all(t.ascii_art.endswith("\n" + " " * 16) for t in art_templates)


def test_text_templates_contain_top_slot():
    for name in TEXT_TEMPLATES:
        assert "{{TOP}}" in _by_name(name).ascii_art


def test_text_templates_end_without_trailing_newline():
    for name in TEXT_TEMPLATES:
        assert not _by_name(name).ascii_art.endswith("\n")


def test_duplicate_entries_share_art():
    templates = load_templates()
    assert templates[0].ascii_art == templates[4].ascii_art
    assert templates[0].ascii_art == templates[7].ascii_art
    assert templates[3].ascii_art != templates[5].ascii_art
    assert templates[0].ascii_art != templates[6].ascii_art


def test_first_template_shape():
    art = load_templates()[0].ascii_art
    lines = art.split("\n")
    assert lines[1] == "                 .-."
    assert lines[-2] == "                `-'"


def test_flat_top_bottle_base():
    art = load_templates()[6].ascii_art
    assert "\\_________/" in art
    assert "___________" in art


def test_cat_feature_keeps_trailing_spaces():
    lines = _by_name("cat_feature").ascii_art.split("\n")
    assert lines[1] == " /\\_/\\  "
    assert lines[2] == "( o.o ) {{TOP}}"
    assert lines[3] == " > ^ <  "
    assert lines[4] == "{{BOTTOM}}"


def test_coding_life_keeps_literal_braces():
    art = _by_name("coding_life").ascii_art
    assert art.startswith("\nwhile (alive) {{\n")
    assert art.endswith("sleep();\n}}")


def test_hello_world_has_no_bottom_slot():
    art = _by_name("hello_world").ascii_art
    assert "{{BOTTOM}}" not in art
    assert art.count("{{TOP}}") == 3


def test_each_call_returns_fresh_list():
    first = load_templates()
    second = load_templates()
    assert first == second
    first.clear()
    assert [t.name for t in load_templates()] == EXPECTED_NAMES