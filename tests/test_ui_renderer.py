import numpy as np
import pytest

from zenithengine.font import Font, Glyph
from zenithengine.stats import RendererStats
from zenithengine.texture import Texture2D
from zenithengine.ui_renderer import Anchor, UILayer, UIRenderer

WINDOW = (200, 100)


def _texture(width=2, height=2):
    return Texture2D(np.zeros((height, width), dtype=np.uint8), 1)


def _font():
    a = Glyph(_texture(4, 6), (4, 6), (1, 6), 5)
    g = Glyph(_texture(4, 8), (4, 8), (0, 5), 4)
    return Font({"a": a, "g": g})


def _renderer(**kwargs):
    renderer = UIRenderer(stats=RendererStats(), **kwargs)
    renderer.begin(WINDOW)
    return renderer


def _positions(batch):
    return [vertex.position for vertex in batch.vertices]


def test_image_centered_on_window_center():
    renderer = _renderer()
    renderer.draw_image(_texture(), (10, -5), (30, 20), anchor=Anchor.MIDDLE_CENTER,
                        pivot=Anchor.MIDDLE_CENTER)
    _, images = renderer.end()
    centroid = np.mean([vertex.position for vertex in images.vertices], axis=0)
    assert centroid == pytest.approx((WINDOW[0] / 2 + 10, WINDOW[1] / 2 - 5, 0.0))


def test_image_top_left_anchor_and_pivot():
    renderer = _renderer()
    renderer.draw_image(_texture(), (5, 7), (30, 20), anchor=Anchor.TOP_LEFT, pivot=Anchor.TOP_LEFT)
    _, images = renderer.end()
    top_left = images.vertices[3].position
    assert top_left == pytest.approx((5, WINDOW[1] - 7, 0.0))
    assert images.vertices[2].position[0] - top_left[0] == pytest.approx(30)


def test_rotation_keeps_center_pivot_fixed():
    renderer = _renderer()
    renderer.draw_image(_texture(), (0, 0), (30, 20), rotation=37.0)
    _, images = renderer.end()
    centroid = np.mean([vertex.position for vertex in images.vertices], axis=0)
    assert centroid == pytest.approx((WINDOW[0] / 2, WINDOW[1] / 2, 0.0))


def test_same_image_shares_texture_slot():
    renderer = _renderer()
    texture = _texture()
    renderer.draw_image(texture, (0, 0), (1, 1))
    renderer.draw_image(texture, (5, 5), (1, 1))
    _, images = renderer.end()
    assert images.textures == (texture,)
    assert {vertex.texture_index for vertex in images.vertices} == {0.0}


def test_texture_slots_full_flushes_image_layer():
    records = []
    renderer = _renderer(max_textures=3, on_flush=lambda layer, batch: records.append((layer, batch)))
    textures = [_texture() for _ in range(3)]
    for texture in textures:
        renderer.draw_image(texture, (0, 0), (1, 1))
    assert [layer for layer, _ in records] == [UILayer.IMAGE]
    assert records[0][1].textures == tuple(textures[:2])
    _, images = renderer.end()
    assert images.textures == (textures[2],)


def test_full_image_batch_flushes():
    records = []
    renderer = _renderer(quads_per_batch=2, on_flush=lambda layer, batch: records.append(layer))
    texture = _texture()
    for _ in range(3):
        renderer.draw_image(texture, (0, 0), (1, 1))
    assert records == [UILayer.IMAGE]
    _, images = renderer.end()
    assert images.quad_count == 1


def test_full_text_batch_ends_both_layers():
    records = []
    renderer = _renderer(quads_per_batch=1, on_flush=lambda layer, batch: records.append(layer))
    font = _font()
    renderer.draw_char(font, "a", (0, 0))
    renderer.draw_char(font, "a", (10, 0))
    assert records == [UILayer.TEXT, UILayer.IMAGE]
    assert renderer.window_size == WINDOW


def test_char_quad_matches_glyph_at_native_size():
    renderer = _renderer()
    font = _font()
    renderer.draw_char(font, "a", (3, 4), font_size=font.font_size)
    text, _ = renderer.end()
    first, _, third, _ = _positions(text)
    assert first == pytest.approx((3, 4, 0))
    assert (third[0] - first[0], third[1] - first[1]) == pytest.approx(font.glyph("a").size)


def test_missing_char_draws_empty_quad():
    renderer = _renderer()
    renderer.draw_char(_font(), "?", (3, 4))
    text, _ = renderer.end()
    assert set(_positions(text)) == {(3.0, 4.0, 0.0)}


def test_text_emits_one_quad_per_char_advancing_right():
    renderer = _renderer()
    renderer.draw_text(_font(), "agag", (0, 0))
    text, _ = renderer.end()
    assert text.quad_count == 4
    lefts = [text.vertices[i * 4].position[0] for i in range(4)]
    assert lefts == sorted(lefts)
    assert len(set(lefts)) == 4


def test_bottom_left_anchor_matches_plain_position():
    font = _font()
    plain = _renderer()
    plain.draw_text(font, "ga", (12, 9), font_size=16)
    anchored = _renderer()
    anchored.draw_text(font, "ga", (12, 9), Anchor.BOTTOM_LEFT, font_size=16)
    assert _positions(plain.end()[0]) == pytest.approx(_positions(anchored.end()[0]))


def test_middle_left_anchor_shifts_vertically():
    font = _font()
    bottom = _renderer()
    bottom.draw_text(font, "ga", (0, 0), Anchor.BOTTOM_LEFT, font_size=16)
    middle = _renderer()
    middle.draw_text(font, "ga", (0, 0), Anchor.MIDDLE_LEFT, font_size=16)
    shift = WINDOW[1] / 2 - 16 / 2
    low = _positions(bottom.end()[0])
    high = _positions(middle.end()[0])
    for (x0, y0, _), (x1, y1, _) in zip(low, high):
        assert x1 == pytest.approx(x0)
        assert y1 - y0 == pytest.approx(shift)


def test_stats_count_quads_and_batches():
    renderer = _renderer()
    renderer.draw_image(_texture(), (0, 0), (1, 1))
    renderer.draw_char(_font(), "a", (0, 0))
    renderer.end()
    assert renderer.stats == RendererStats(batch_count=2, triangle_count=4, vertex_count=8)


def test_batch_projection_maps_window_to_clip_space():
    renderer = _renderer()
    text, images = renderer.end()
    for batch in (text, images):
        corner = batch.view_projection @ np.array([WINDOW[0], WINDOW[1], 0.0, 1.0])
        origin = batch.view_projection @ np.array([0.0, 0.0, 0.0, 1.0])
        assert corner[:2] == pytest.approx((1.0, 1.0))
        assert origin[:2] == pytest.approx((-1.0, -1.0))


def test_anchor_grid_order():
    assert [Anchor(i).name for i in (0, 4, 8)] == ["TOP_LEFT", "MIDDLE_CENTER", "BOTTOM_RIGHT"]


def test_invalid_configuration_rejected():
    with pytest.raises(ValueError):
        UIRenderer(max_textures=1)
    with pytest.raises(ValueError):
        UIRenderer(quads_per_batch=0)