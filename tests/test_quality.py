from raytracer.quality import QualityOptions


def test_default_values():
    q = QualityOptions()
    assert (q.samples_per_pixel, q.max_depth, q.img_width) == (100, 50, 400)


def test_constructor_defaults_match_default():
    assert QualityOptions() == QualityOptions.DEFAULT


def test_custom_values():
    q = QualityOptions(10, 5, 200)
    assert (q.samples_per_pixel, q.max_depth, q.img_width) == (10, 5, 200)


def test_equal_options_hash_alike():
    options = {QualityOptions(10, 5, 200), QualityOptions(10, 5, 200), QualityOptions(1, 2, 3)}
    assert len(options) == 2