import pytest

from arkpaint.colors import (
    ARK_COLOR_TABLE,
    ColorEntry,
    ColorSelection,
    color_distances,
    parse_color_table,
    read_color_table,
)


def test_rgb_components():
    entry = ColorEntry("Brick", 0xFF94321C, 0x18)
    assert entry.rgb() == (0x94, 0x32, 0x1C)


def test_builtin_table_has_source_entries():
    selected = ColorSelection(ARK_COLOR_TABLE).selected()
    names = [e.name for e in selected]
    assert len(names) == 25
    red = selected[names.index("Red")]
    assert (red.argb, red.id) == (0xFFFF0000, 0x01)
    assert red.rgb() == (0xFF, 0x00, 0x00)


def test_parse_valid_lines():
    table = parse_color_table(["Red,ffff0000,A\n", "Blue, 0xff0000ff, B"])
    assert table == [
        ColorEntry("Red", 0xFFFF0000, ord("A")),
        ColorEntry("Blue", 0xFF0000FF, ord("B")),
    ]


def test_parse_skips_malformed_lines():
    lines = ["", "NoComma", "OnlyOne,ff", "Missing,ff,   ", "Good,ff,x"]
    table = parse_color_table(lines)
    assert [e.name for e in table] == ["Good"]


def test_parse_id_is_first_character_only():
    (entry,) = parse_color_table(["Green,ff00ff00,xyz"])
    assert entry.id == ord("x")


def test_parse_bad_hex_yields_zero():
    (entry,) = parse_color_table(["Odd,zz,q"])
    assert entry.argb == 0


def test_read_color_table_round_trip(tmp_path):
    path = tmp_path / "table.csv"
    path.write_text("Black,ff1c1c1c,a\nWhite,fffefefe,b\n", encoding="utf-8")
    table = read_color_table(path)
    assert [(e.name, e.argb) for e in table] == [
        ("Black", 0xFF1C1C1C),
        ("White", 0xFFFEFEFE),
    ]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_color_table(tmp_path / "absent.csv")


def test_color_distances_exact_match_is_zero():
    distances = dict(color_distances(0xFFFF0000))
    assert distances["Red"] == 0.0
    assert len(distances) == len(ARK_COLOR_TABLE)
    assert min(distances.values()) == distances["Red"]


def test_selection_starts_all_selected():
    table = parse_color_table(["A,ff000000,a", "B,ffffffff,b"])
    sel = ColorSelection(table)
    assert sel.selected() == table


def test_selection_toggle_and_bulk():
    table = parse_color_table(["A,ff000000,a", "B,ffffffff,b", "C,ff00ff00,c"])
    sel = ColorSelection(table)
    sel.set_checked(1, False)
    assert [e.name for e in sel.selected()] == ["A", "C"]
    sel.deselect_all()
    assert sel.selected() == []
    sel.select_all()
    assert sel.selected() == table


def test_selected_ark_uses_builtin_positions():
    table = parse_color_table(["X,ff000000,a", "Y,ffffffff,b", "Z,ff00ff00,c"])
    sel = ColorSelection(table)
    sel.set_checked(0, False)
    assert sel.selected_ark() == [ARK_COLOR_TABLE[1], ARK_COLOR_TABLE[2]]


def test_set_checked_out_of_range():
    sel = ColorSelection(ARK_COLOR_TABLE)
    with pytest.raises(IndexError):
        sel.set_checked(len(ARK_COLOR_TABLE), True)