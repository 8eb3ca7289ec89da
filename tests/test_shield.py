import pytest

from arcadebox.geometry import Rect
from arcadebox.shield import SECTION_SIZE, SectionType, Shield, ShieldSection


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def cleared(section):
    return {
        (x, y)
        for y in range(SECTION_SIZE)
        for x in range(SECTION_SIZE)
        if not section.is_solid(x, y)
    }


def test_block_is_full():
    section = ShieldSection(SectionType.BLOCK, 0, 0)
    assert section.solid_count() == 400


@pytest.mark.parametrize(
    "kind, solid, hollow",
    [
        (SectionType.DOWN_LEFT, (3, 5), (5, 3)),
        (SectionType.TOP_RIGHT, (5, 3), (3, 5)),
        (SectionType.DOWN_RIGHT, (19, 19), (0, 0)),
        (SectionType.TOP_LEFT, (0, 0), (19, 19)),
    ],
)
def test_section_shapes(kind, solid, hollow):
    section = ShieldSection(kind, 0, 0)
    assert section.is_solid(*solid) is True
    assert section.is_solid(*hollow) is False


def test_is_solid_outside_is_false():
    section = ShieldSection(SectionType.BLOCK, 0, 0)
    assert section.is_solid(-1, 0) is False
    assert section.is_solid(0, SECTION_SIZE) is False


def test_miss_leaves_section_intact():
    section = ShieldSection(SectionType.BLOCK, 64, 350, rng=_FixedRng(0.0))
    assert section.hit((10.0, 10.0), (3.0, 12.0)) is False
    assert section.solid_count() == 400


def test_single_pixel_hit_without_spread():
    section = ShieldSection(SectionType.BLOCK, 64, 350, rng=_FixedRng(0.0))
    assert section.hit((64.5, 350.7), (1.0, 1.0)) is True
    assert cleared(section) == {(0, 0)}
    assert section.hit((64.5, 350.7), (1.0, 1.0)) is False


def test_hit_clears_bullet_footprint():
    section = ShieldSection(SectionType.BLOCK, 0, 0, rng=_FixedRng(0.0))
    assert section.hit((4.0, 2.0), (3.0, 12.0)) is True
    expected = {(x, y) for x in range(4, 7) for y in range(2, 14)}
    assert cleared(section) == expected


def test_spread_clears_more_than_footprint():
    section = ShieldSection(SectionType.BLOCK, 0, 0, rng=_FixedRng(0.99))
    assert section.hit((8.0, 2.0), (3.0, 12.0)) is True
    footprint = {(x, y) for x in range(8, 11) for y in range(2, 14)}
    holes = cleared(section)
    assert footprint < holes
    assert all(2 <= y < 14 for _, y in holes)


def test_hit_skips_empty_pixels():
    section = ShieldSection(SectionType.DOWN_RIGHT, 0, 0, rng=_FixedRng(0.0))
    assert section.hit((0.0, 0.0), (1.0, 1.0)) is False
    before = section.solid_count()
    assert section.hit((19.0, 19.0), (1.0, 1.0)) is True
    assert section.solid_count() == before - 1


def test_shield_layout():
    shield = Shield(64, 350)
    assert len(shield.parts) == 16
    assert [part.ident for part in shield.parts] == list(range(16))
    assert shield.parts[0].kind is SectionType.DOWN_RIGHT
    assert shield.parts[3].kind is SectionType.DOWN_LEFT
    assert shield.parts[13].kind is SectionType.TOP_LEFT
    assert shield.parts[14].kind is SectionType.TOP_RIGHT
    assert shield.parts[5].rect == Rect(84, 370, 20, 20)
    assert shield.rect == Rect(64, 350, 80, 80)


def test_shield_parts_tile_the_area():
    shield = Shield(0, 0)
    corners = {(part.rect.x, part.rect.y) for part in shield.parts}
    assert corners == {(x * 20, y * 20) for x in range(4) for y in range(4)}


def test_shield_solid_count_drops_after_hit():
    shield = Shield(0, 0, rng=_FixedRng(0.0))
    before = shield.solid_count()
    assert before == sum(part.solid_count() for part in shield.parts)
    assert shield.parts[5].hit((25.0, 25.0), (1.0, 1.0)) is True
    assert shield.solid_count() == before - 1