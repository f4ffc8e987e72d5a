from braille_canvas.cells import Cell, CellStore


def test_get_or_create_inserts_default_cell() -> None:
    store = CellStore()
    cell = store.get_or_create((3, 1))

    assert cell == Cell()
    assert cell.mask == 0 and cell.char is None and not cell.colored
    assert (3, 1) in store
    assert len(store) == 1


def test_get_or_create_returns_same_cell() -> None:
    store = CellStore()
    first = store.get_or_create((0, 0))
    first.mask = 0x09
    assert store.get_or_create((0, 0)) is first
    assert store.lookup((0, 0)).mask == 0x09


def test_lookup_does_not_create() -> None:
    store = CellStore()
    assert store.lookup((5, 5)) is None
    assert len(store) == 0
    assert store.extent() == (0, 0)


def test_extent_tracks_highest_keys_and_resets_on_clear() -> None:
    store = CellStore()
    store.get_or_create((7, 2))
    store.get_or_create((1, 9))
    assert store.extent() == (7, 9)

    store.clear()
    assert len(store) == 0
    assert store.extent() == (0, 0)
    assert list(store) == []


def test_mode_switches_discard_other_mode() -> None:
    cell = Cell(mask=0xFF)
    cell.show_char('x')
    assert cell.mask == 0 and cell.char == 'x'

    cell.show_dots('red')
    assert cell.char is None
    assert cell.colored and cell.color == 'red'

    cell.show_dots()
    assert not cell.colored and cell.color is None
