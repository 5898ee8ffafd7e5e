from rawbuf.window import Window


def test_window_inside_region():
    window = Window.clamp(10, 2, 5)
    assert window == Window(2, 5)
    assert window.end == 7
    assert window.as_slice() == slice(2, 7)
    assert not window.empty


def test_window_length_shrinks_to_fit():
    window = Window.clamp(10, 8, 100)
    assert window == Window(8, 2)


def test_window_offset_past_end_is_empty():
    window = Window.clamp(10, 10, 3)
    assert window.empty
    assert window.start == 10

    window = Window.clamp(10, 50, 3)
    assert window == Window(10, 0)


def test_window_negative_values_clamp_to_zero():
    assert Window.clamp(10, -4, 3) == Window(0, 3)
    assert Window.clamp(10, 4, -3) == Window(4, 0)


def test_window_invariant():
    for size in (0, 1, 7):
        for offset in range(-1, 10):
            for length in range(-1, 10):
                window = Window.clamp(size, offset, length)
                assert 0 <= window.start <= size
                assert window.end <= size
