from app.branding import _COLOR_SCHEMES, get_brand_color


class TestBrandColor:
    def test_same_id_same_color(self):
        assert get_brand_color("seller-002") == get_brand_color("seller-002")

    def test_index_comes_from_digits_in_id(self):
        assert get_brand_color("seller-001") == "from-emerald-500 to-teal-600"
        assert get_brand_color("test-seller-001") == "from-emerald-500 to-teal-600"
        # 15 wraps around the palette
        assert get_brand_color("seller-015") == "from-amber-500 to-orange-600"

    def test_digits_are_joined_across_the_id(self):
        # "1" + "2" -> 12
        assert get_brand_color("a1-b2") == _COLOR_SCHEMES[12]

    def test_id_without_digits_gets_first_scheme(self):
        assert get_brand_color("acme-roasters") == _COLOR_SCHEMES[0]
        assert get_brand_color("") == _COLOR_SCHEMES[0]

    def test_every_result_is_in_palette(self):
        for i in range(100):
            assert get_brand_color(f"seller-{i:03d}") in _COLOR_SCHEMES
