from cookbook.mandelbrot import BLACK, acos, mandelbrot, newton, render, sqrt


def test_mandelbrot_inside_is_black():
    assert mandelbrot(0j) == BLACK


def test_mandelbrot_immediate_escape_is_white():
    assert mandelbrot(3 + 0j) == (255, 255, 255)


def test_mandelbrot_gray():
    r, g, b = mandelbrot(1 + 1j)
    assert r == g == b


def test_newton():
    assert newton(1 + 0j) == (255, 255, 255)
    assert newton(0j) == BLACK


def test_acos_and_sqrt_in_range():
    for color in (acos(0.5 + 0.5j), sqrt(-1 + 0j)):
        assert len(color) == 3
        assert all(0 <= c <= 255 for c in color)


def test_render_size_and_center():
    img = render(8, 8)
    assert img.size == (8, 8)
    assert img.getpixel((4, 4)) == BLACK
    assert img.getpixel((0, 0)) != BLACK