import pytest

from rangekit.relations.codes import RelationCode


class TestRelationCodeContract:
    def test_fixed_encodings(self):
        assert RelationCode.STRICTLY_LT == -4
        assert RelationCode.OVERLAPS_LT == -2
        assert RelationCode.CONTAINED_BY == -1
        assert RelationCode.EQ == 0
        assert RelationCode.CONTAINS == 1
        assert RelationCode.OVERLAPS_GT == 2
        assert RelationCode.STRICTLY_GT == 4

    def test_completeness(self):
        assert len(RelationCode) == 7
        values = [member.value for member in RelationCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize("code, inverse", [
        (RelationCode.STRICTLY_LT, RelationCode.STRICTLY_GT),
        (RelationCode.OVERLAPS_LT, RelationCode.OVERLAPS_GT),
        (RelationCode.CONTAINED_BY, RelationCode.CONTAINS),
        (RelationCode.EQ, RelationCode.EQ),
    ])
    def test_inverse(self, code, inverse):
        assert code.inverse() is inverse
        assert inverse.inverse() is code
        assert -code is inverse

    def test_every_code_has_an_inverse(self):
        for code in RelationCode:
            assert code.inverse().inverse() is code
