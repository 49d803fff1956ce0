from glide.geometry import Rect, chance, clamp, rects_overlap, uniform


def test_clamp_bounds():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(0.25, 0.0, 1.0) == 0.25


def test_uniform_maps_unit_draw_onto_range(scripted):
    rng = scripted([0.0, 0.5, 0.999])
    assert uniform(rng, 10.0, 20.0) == 10.0
    assert uniform(rng, 10.0, 20.0) == 15.0
    assert 19.98 < uniform(rng, 10.0, 20.0) < 20.0


def test_chance_is_strictly_less_than(scripted):
    assert chance(scripted([0.79]), 0.8)
    assert not chance(scripted([0.8]), 0.8)


def test_rects_overlap():
    a = Rect(0, 0, 10, 10)
    assert rects_overlap(a, Rect(5, 5, 10, 10))
    assert rects_overlap(Rect(5, 5, 10, 10), a)
    assert not rects_overlap(a, Rect(20, 0, 5, 5))


def test_touching_edges_do_not_overlap():
    a = Rect(0, 0, 10, 10)
    assert not rects_overlap(a, Rect(10, 0, 10, 10))
    assert not rects_overlap(a, Rect(0, 10, 10, 10))


def test_centred_rect():
    r = Rect.centred(50, 40, 20, 10)
    assert (r.x, r.y, r.w, r.h) == (40, 35, 20, 10)
    assert r.centre_x == 50
    assert r.centre_y == 40
