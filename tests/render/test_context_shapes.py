from __future__ import annotations

from rasterdraw.core.models import BLACK, TRANSPARENT, WHITE
from rasterdraw.render.context import DrawContext

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def test_dot_reads_back_pen_color(make_surface) -> None:
    surface = make_surface()
    ctx = DrawContext(surface)
    ctx.set_pen(RED)
    ctx.dot(3, 4)
    assert surface.get_pixel(3, 4) == RED


def test_pen_change_only_affects_later_calls(make_surface) -> None:
    surface = make_surface()
    ctx = DrawContext(surface)
    ctx.dot(1, 1)
    ctx.set_pen(RED)
    ctx.dot(2, 2)
    assert surface.get_pixel(1, 1) == BLACK
    assert surface.get_pixel(2, 2) == RED


def test_dot_out_of_bounds_is_ignored(make_surface) -> None:
    surface = make_surface()
    ctx = DrawContext(surface)
    ctx.dot(-1, 3)
    ctx.dot(10, 10)
    ctx.dot(500, -500)
    assert all(
        surface.get_pixel(x, y) == WHITE for x in range(10) for y in range(10)
    )


def test_dots_plot_in_order_without_dedup(recording) -> None:
    surface = recording()
    ctx = DrawContext(surface)
    ctx.dots([(1, 1), (2, 2), (1, 1)])
    assert [(x, y) for x, y, _ in surface.writes] == [(1, 1), (2, 2), (1, 1)]


def test_fill_pixel_uses_fill_color(recording) -> None:
    surface = recording()
    ctx = DrawContext(surface)
    ctx.set_fill(BLUE)
    ctx.fill_pixel(4, 4)
    assert surface.get_pixel(4, 4) == BLUE


def test_zero_length_line_plots_nothing(recording) -> None:
    surface = recording()
    ctx = DrawContext(surface)
    ctx.line(5, 5, 5, 5)
    assert surface.writes == []


def test_rect_outline_scenario(make_surface) -> None:
    surface = make_surface(10, 10, background=WHITE)
    ctx = DrawContext(surface)
    ctx.rect(2, 2, 7, 7)
    for corner in [(2, 2), (7, 2), (7, 7), (2, 7)]:
        assert surface.get_pixel(*corner) == BLACK
    assert surface.get_pixel(5, 5) == WHITE


def test_rect_outline_is_closed(recording) -> None:
    surface = recording()
    ctx = DrawContext(surface)
    ctx.rect(7, 6, 2, 1)
    expected = set()
    for x in range(2, 8):
        expected |= {(x, 1), (x, 6)}
    for y in range(1, 7):
        expected |= {(2, y), (7, y)}
    assert surface.points() == expected


def test_rect_fill_covers_whole_rectangle(recording) -> None:
    surface = recording()
    ctx = DrawContext(surface)
    ctx.set_pen(TRANSPARENT)
    ctx.set_fill(BLUE)
    ctx.rect(2, 3, 6, 8)
    expected = {(x, y) for x in range(2, 7) for y in range(3, 9)}
    assert surface.points(BLUE) == expected
    assert surface.writes == []


def test_rect_outline_drawn_over_fill(make_surface) -> None:
    surface = make_surface(10, 10)
    ctx = DrawContext(surface)
    ctx.set_fill(BLUE)
    ctx.rect(1, 1, 8, 8)
    assert surface.get_pixel(1, 1) == BLACK
    assert surface.get_pixel(8, 8) == BLACK
    assert surface.get_pixel(4, 5) == BLUE
    assert surface.get_pixel(0, 0) == WHITE
    assert surface.get_pixel(9, 9) == WHITE


def test_rect_transparent_pen_and_fill_draw_nothing(recording) -> None:
    surface = recording()
    ctx = DrawContext(surface)
    ctx.set_pen(TRANSPARENT)
    ctx.rect(1, 1, 5, 5)
    assert surface.writes == [] and surface.fills == []


def test_cross_scenario(recording) -> None:
    surface = recording(10, 10)
    ctx = DrawContext(surface)
    ctx.cross(5, 5, 2)
    assert surface.points() == {
        (5, 3),
        (5, 4),
        (5, 5),
        (5, 6),
        (3, 5),
        (4, 5),
        (6, 5),
    }


def test_path_degenerate_inputs_draw_nothing(recording) -> None:
    surface = recording()
    ctx = DrawContext(surface)
    ctx.path([])
    ctx.path([(3, 3)])
    assert surface.writes == []


def test_path_connects_points_without_closing(recording) -> None:
    surface = recording()
    ctx = DrawContext(surface)
    ctx.path([(0, 0), (4, 0), (4, 3)])
    assert surface.points() == {
        (0, 0),
        (1, 0),
        (2, 0),
        (3, 0),
        (4, 0),
        (4, 1),
        (4, 2),
    }


def test_polygon_outline_is_auto_closed(recording) -> None:
    surface = recording(10, 10)
    ctx = DrawContext(surface)
    ctx.polygon([(1, 1), (8, 1), (1, 8)])
    # Only the closing edge (1, 8) -> (1, 1) reaches the left column
    assert {(1, y) for y in range(1, 8)} <= surface.points(BLACK)


def test_polygon_fill_uses_half_open_scan(recording) -> None:
    surface = recording(12, 12)
    ctx = DrawContext(surface)
    ctx.set_pen(TRANSPARENT)
    ctx.set_fill(BLUE)
    ctx.polygon([(2, 2), (8, 2), (8, 8), (2, 8)])
    assert surface.points(BLUE) == {(x, y) for x in range(2, 8) for y in range(2, 8)}


def test_polygon_outline_drawn_over_fill(recording) -> None:
    surface = recording(10, 10)
    ctx = DrawContext(surface)
    ctx.set_fill(BLUE)
    ctx.polygon([(1, 1), (8, 1), (1, 8)])
    assert surface.get_pixel(1, 5) == BLACK
    assert surface.get_pixel(3, 3) == BLUE
    assert surface.get_pixel(8, 8) == TRANSPARENT


def test_polygon_duplicates_fill_like_deduplicated(recording) -> None:
    dup = recording(16, 16)
    ded = recording(16, 16)
    for surface, pts in [
        (dup, [(2, 2), (2, 2), (12, 3), (12, 3), (12, 3), (10, 12), (2, 11), (2, 11)]),
        (ded, [(2, 2), (12, 3), (10, 12), (2, 11)]),
    ]:
        ctx = DrawContext(surface)
        ctx.set_fill(BLUE)
        ctx.polygon(pts)
    assert dup.points(BLUE) == ded.points(BLUE)
    assert dup.points(BLACK) == ded.points(BLACK)
    assert dup.points(BLUE)


def test_polygon_larger_than_surface_is_clamped(recording) -> None:
    surface = recording(8, 8)
    ctx = DrawContext(surface)
    ctx.set_pen(TRANSPARENT)
    ctx.set_fill(BLUE)
    ctx.polygon([(-100, -100), (100, -100), (100, 100), (-100, 100)])
    assert surface.points(BLUE) == {(x, y) for x in range(8) for y in range(8)}
    assert all(0 <= x < 8 and 0 <= y < 8 for x, y, _ in surface.writes)


def test_polygon_degenerate_inputs_draw_nothing(recording) -> None:
    surface = recording()
    ctx = DrawContext(surface)
    ctx.set_fill(BLUE)
    ctx.polygon([])
    ctx.polygon([(4, 4)])
    ctx.polygon([(4, 4), (4, 4), (4, 4)])
    assert surface.writes == []


def test_parabola_skips_points_below_surface(make_surface) -> None:
    surface = make_surface(100, 50)
    ctx = DrawContext(surface)
    ctx.parabola(1.0, 0.0, 0.0)
    plotted = {
        (x, y)
        for x in range(100)
        for y in range(50)
        if surface.get_pixel(x, y) == BLACK
    }
    assert plotted == {(x, x * x) for x in range(8)}


def test_parabola_reaches_far_point_on_tall_surface(make_surface) -> None:
    surface = make_surface(100, 120)
    ctx = DrawContext(surface)
    ctx.parabola(1.0, 0.0, 0.0)
    assert surface.get_pixel(10, 100) == BLACK
    assert surface.get_pixel(11, 119) == WHITE


def test_parabola_arc_limits_x_range(recording) -> None:
    surface = recording(20, 20)
    ctx = DrawContext(surface)
    ctx.parabola_arc(0.0, 1.0, 0.0, 3, 6)
    assert surface.points() == {(3, 3), (4, 4), (5, 5)}


def test_parabola_arc_clamps_to_surface(recording) -> None:
    surface = recording(5, 5)
    ctx = DrawContext(surface)
    ctx.parabola_arc(0.0, 0.0, 2.0, -10, 100)
    assert surface.points() == {(x, 2) for x in range(5)}
    assert len(surface.writes) == 5


def test_is_in_polygon_on_context(recording) -> None:
    ctx = DrawContext(recording())
    tri = [(0, 0), (9, 0), (0, 9)]
    assert ctx.is_in_polygon(2, 2, tri)
    assert not ctx.is_in_polygon(8, 8, tri)
