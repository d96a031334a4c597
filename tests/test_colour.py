import pytest

from strimg.colour import Lab, ciede2000, colour_distance, rgb_to_lab

# Sharma, Wu & Dalal (2005) supplementary test data
SHARMA_PAIRS = [
    (Lab(50.0000, 2.6772, -79.7751), Lab(50.0000, 0.0000, -82.7485), 2.0425),
    (Lab(50.0000, 3.1571, -77.2803), Lab(50.0000, 0.0000, -82.7485), 2.8615),
    (Lab(50.0000, 2.8361, -74.0200), Lab(50.0000, 0.0000, -82.7485), 3.4412),
    (Lab(50.0000, -1.3802, -84.2814), Lab(50.0000, 0.0000, -82.7485), 1.0000),
    (Lab(50.0000, -1.1848, -84.8006), Lab(50.0000, 0.0000, -82.7485), 1.0000),
    (Lab(50.0000, -0.9009, -85.5211), Lab(50.0000, 0.0000, -82.7485), 1.0000),
    (Lab(50.0000, 0.0000, 0.0000), Lab(50.0000, -1.0000, 2.0000), 2.3669),
    (Lab(50.0000, -1.0000, 2.0000), Lab(50.0000, 0.0000, 0.0000), 2.3669),
    (Lab(50.0000, 2.4900, -0.0010), Lab(50.0000, -2.4900, 0.0009), 7.1792),
    (Lab(50.0000, 2.4900, -0.0010), Lab(50.0000, -2.4900, 0.0010), 7.1792),
    (Lab(50.0000, 2.4900, -0.0010), Lab(50.0000, -2.4900, 0.0011), 7.2195),
    (Lab(50.0000, 2.4900, -0.0010), Lab(50.0000, -2.4900, 0.0012), 7.2195),
    (Lab(50.0000, -0.0010, 2.4900), Lab(50.0000, 0.0009, -2.4900), 4.8045),
    (Lab(50.0000, -0.0010, 2.4900), Lab(50.0000, 0.0010, -2.4900), 4.8045),
    (Lab(50.0000, -0.0010, 2.4900), Lab(50.0000, 0.0011, -2.4900), 4.7461),
    (Lab(50.0000, 2.5000, 0.0000), Lab(50.0000, 0.0000, -2.5000), 4.3065),
    (Lab(50.0000, 2.5000, 0.0000), Lab(73.0000, 25.0000, -18.0000), 27.1492),
    (Lab(50.0000, 2.5000, 0.0000), Lab(61.0000, -5.0000, 29.0000), 22.8977),
    (Lab(50.0000, 2.5000, 0.0000), Lab(56.0000, -27.0000, -3.0000), 31.9030),
    (Lab(50.0000, 2.5000, 0.0000), Lab(58.0000, 24.0000, 15.0000), 19.4535),
    (Lab(50.0000, 2.5000, 0.0000), Lab(50.0000, 3.1736, 0.5854), 1.0000),
    (Lab(50.0000, 2.5000, 0.0000), Lab(50.0000, 3.2972, 0.0000), 1.0000),
    (Lab(50.0000, 2.5000, 0.0000), Lab(50.0000, 1.8634, 0.5757), 1.0000),
    (Lab(50.0000, 2.5000, 0.0000), Lab(50.0000, 3.2592, 0.3350), 1.0000),
    (Lab(60.2574, -34.0099, 36.2677), Lab(60.4626, -34.1751, 39.4387), 1.2644),
    (Lab(63.0109, -31.0961, -5.8663), Lab(62.8187, -29.7946, -4.0864), 1.2630),
    (Lab(61.2901, 3.7196, -5.3901), Lab(61.4292, 2.2480, -4.9620), 1.8731),
    (Lab(35.0831, -44.1164, 3.7933), Lab(35.0232, -40.0716, 1.5901), 1.8645),
    (Lab(22.7233, 20.0904, -46.6940), Lab(23.0331, 14.9730, -42.5619), 2.0373),
    (Lab(36.4612, 47.8580, 18.3852), Lab(36.2715, 50.5065, 21.2231), 1.4146),
    (Lab(90.8027, -2.0831, 1.4410), Lab(91.1528, -1.6435, 0.0447), 1.4441),
    (Lab(90.9257, -0.5406, -0.9208), Lab(88.6381, -0.8985, -0.7239), 1.5381),
    (Lab(6.7747, -0.2908, -2.4247), Lab(5.8714, -0.0985, -2.2286), 0.6377),
    (Lab(2.0776, 0.0795, -1.1350), Lab(0.9033, -0.0636, -0.5514), 0.9082),
]


def test_black_has_zero_lightness():
    lab = rgb_to_lab(0, 0, 0)
    assert lab.L == pytest.approx(0.0, abs=1e-9)
    assert lab.a == pytest.approx(0.0, abs=1e-9)
    assert lab.b == pytest.approx(0.0, abs=1e-9)


def test_white_is_neutral_full_lightness():
    lab = rgb_to_lab(255, 255, 255)
    assert lab.L == pytest.approx(100.0, abs=0.01)
    assert lab.a == pytest.approx(0.0, abs=0.05)
    assert lab.b == pytest.approx(0.0, abs=0.05)


def test_mid_gray_is_neutral():
    lab = rgb_to_lab(128, 128, 128)
    assert lab.L == pytest.approx(53.59, abs=0.05)
    assert lab.a == pytest.approx(0.0, abs=0.05)
    assert lab.b == pytest.approx(0.0, abs=0.05)


def test_red():
    lab = rgb_to_lab(255, 0, 0)
    assert lab.L == pytest.approx(53.24, abs=0.1)
    assert lab.a == pytest.approx(80.11, abs=0.2)
    assert lab.b == pytest.approx(67.22, abs=0.2)


def test_lightness_increases_along_gray_ramp():
    values = [rgb_to_lab(v, v, v).L for v in range(0, 256, 15)]
    assert values == sorted(values)


@pytest.mark.parametrize("lab1,lab2,expected", SHARMA_PAIRS)
def test_ciede2000_reference_data(lab1, lab2, expected):
    assert ciede2000(lab1, lab2) == pytest.approx(expected, abs=1e-4)


@pytest.mark.parametrize("lab1,lab2,expected", SHARMA_PAIRS)
def test_ciede2000_is_symmetric(lab1, lab2, expected):
    assert ciede2000(lab1, lab2) == ciede2000(lab2, lab1)


def test_ciede2000_identical_is_zero():
    for rgb in [(0, 0, 0), (255, 255, 255), (12, 200, 99), (128, 0, 128)]:
        lab = rgb_to_lab(*rgb)
        assert ciede2000(lab, lab) == 0.0


def test_ciede2000_weights_scale_lightness_term():
    lab1 = Lab(50.0, 0.0, 0.0)
    lab2 = Lab(60.0, 0.0, 0.0)
    assert ciede2000(lab1, lab2, kL=2) == pytest.approx(ciede2000(lab1, lab2) / 2)


def test_colour_distance():
    assert colour_distance((255, 0, 0), (255, 0, 0)) == 0.0
    assert colour_distance((255, 0, 0), (250, 5, 5)) < colour_distance((255, 0, 0), (0, 0, 255))
    assert colour_distance((10, 20, 30), (200, 100, 0)) == colour_distance((200, 100, 0), (10, 20, 30))
