from zenithengine.stats import RendererStats, default_stats


def test_starts_at_zero():
    stats = RendererStats()
    assert (stats.batch_count, stats.triangle_count, stats.vertex_count) == (0, 0, 0)


def test_add_quad_counts_triangles_and_vertices():
    stats = RendererStats()
    stats.add_quad()
    assert stats.triangle_count == 2
    assert stats.vertex_count == 4
    assert stats.batch_count == 0


def test_vertices_twice_triangles():
    stats = RendererStats()
    for _ in range(7):
        stats.add_quad()
    assert stats.vertex_count == 2 * stats.triangle_count


def test_add_batch_and_reset():
    stats = RendererStats()
    stats.add_batch()
    stats.add_batch()
    stats.add_quad()
    assert stats.batch_count == 2
    stats.reset()
    assert stats == RendererStats()


def test_default_stats_resettable():
    default_stats.add_quad()
    default_stats.reset()
    assert default_stats == RendererStats()