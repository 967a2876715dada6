import pytest

from lsystems.generation import Family, UnknownFamilyError
from lsystems.generation.rules import ENGINES, engine_for


class TestFamily:
    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("A", Family.ORIGINAL),
            ("B", Family.BARNSLEY),
            ("F", Family.FRACTAL_PLANT),
            ("L", Family.LICHTENBERG),
            ("C", Family.CRACKED_EARTH),
            ("P", Family.PORPITA),
            ("fractal_plant", Family.FRACTAL_PLANT),
            ("Fractal Plant", Family.FRACTAL_PLANT),
            ("CRACKED_EARTH", Family.CRACKED_EARTH),
            (Family.PORPITA, Family.PORPITA),
        ],
    )
    def test_parse(self, tag, expected: Family) -> None:
        assert Family.parse(tag) is expected

    @pytest.mark.parametrize("tag", ["", "Z", "koch", 3, None])
    def test_unknown_tags_raise(self, tag) -> None:
        with pytest.raises(UnknownFamilyError):
            Family.parse(tag)

    def test_unknown_family_is_a_value_error(self) -> None:
        assert issubclass(UnknownFamilyError, ValueError)

    def test_every_family_has_an_engine_and_a_name(self) -> None:
        assert set(ENGINES) == set(Family)
        for family in Family:
            assert engine_for(family).family is family
            assert family.display_name

    def test_engine_for_accepts_selector_codes(self) -> None:
        assert engine_for("P") is ENGINES[Family.PORPITA]
