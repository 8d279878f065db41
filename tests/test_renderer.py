import pytest

from softraster.renderer import DepthBuffer, Light, Renderer


def test_depth_buffer_starts_at_far_depth():
    buf = DepthBuffer(4, 3)
    assert buf[0, 0] == 1.0
    assert buf[3, 2] == 1.0


def test_depth_buffer_set_and_get():
    buf = DepthBuffer(4, 3)
    buf[2, 1] = 0.5
    assert buf[2, 1] == pytest.approx(0.5)
    assert buf[1, 2] == buf[0, 0]


def test_depth_buffer_clear_resets():
    buf = DepthBuffer(2, 2)
    buf[1, 1] = 0.25
    buf.clear()
    assert buf[1, 1] == buf[0, 0]


@pytest.mark.parametrize("xy", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_depth_buffer_out_of_range(xy):
    buf = DepthBuffer(4, 3)
    with pytest.raises(IndexError):
        buf[xy]
    with pytest.raises(IndexError):
        buf[xy] = 0.0
    assert [buf[x, y] for y in range(3) for x in range(4)] == [1.0] * 12


def test_depth_buffer_invalid_size():
    with pytest.raises(ValueError):
        DepthBuffer(0, 5)


def test_renderer_default_size():
    renderer = Renderer()
    assert (renderer.canvas.width, renderer.canvas.height) == (1024, 768)
    assert (renderer.zbuffer.width, renderer.zbuffer.height) == (1024, 768)
    assert renderer.canvas.name == "Raster"


def test_renderer_settings():
    renderer = Renderer(8, 6)
    assert renderer.aspect == pytest.approx(4.0 / 3.0)
    assert renderer.near == pytest.approx(0.1)
    assert renderer.far == pytest.approx(100.0)


def test_renderer_clear_resets_canvas_and_depth():
    renderer = Renderer(8, 6)
    renderer.canvas.draw(3, 2, 10, 20, 30)
    renderer.zbuffer[3, 2] = 0.1
    renderer.clear()
    assert renderer.canvas.pixel(3, 2) == (0, 0, 0)
    assert renderer.zbuffer[3, 2] == renderer.zbuffer[0, 0]


def test_renderer_present_invokes_callback():
    frames = []
    renderer = Renderer(4, 4, on_present=lambda w: frames.append(w.pixel(1, 1)))
    renderer.canvas.draw(1, 1, 7, 8, 9)
    renderer.present()
    assert frames == [(7, 8, 9)]


def test_light_defaults():
    light = Light()
    assert (light.omega_i.x, light.omega_i.y, light.omega_i.z, light.omega_i.w) == (
        0.0,
        1.0,
        1.0,
        0.0,
    )
    assert light.diffuse.r == 1.0
    assert light.ambient.g == pytest.approx(0.2)