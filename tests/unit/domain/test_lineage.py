from __future__ import annotations

from uuid import uuid4

import pytest

from pedigree.domain.lineage import (
    ancestor_paths,
    inbreeding_coefficient,
    recommendations,
)


def ids(count: int):
    return [uuid4() for _ in range(count)]


def test_unrelated_parents_have_zero_coefficient():
    sire, dam, a, b, c, d = ids(6)
    parents = {sire: (a, b), dam: (c, d)}
    result = inbreeding_coefficient(sire, dam, parents, generations=5)
    assert result.coefficient == 0.0
    assert result.common_ancestors == []
    assert result.genetic_diversity == 1.0


def test_full_siblings_give_one_quarter():
    sire, dam, grandsire, granddam = ids(4)
    parents = {sire: (grandsire, granddam), dam: (grandsire, granddam)}
    result = inbreeding_coefficient(sire, dam, parents, generations=5)
    assert result.coefficient == pytest.approx(0.25)
    assert {item.dog_id for item in result.common_ancestors} == {grandsire, granddam}
    assert all(item.contribution == pytest.approx(0.125) for item in result.common_ancestors)


def test_half_siblings_give_one_eighth():
    sire, dam, shared_sire, dam_a, dam_b = ids(5)
    parents = {sire: (shared_sire, dam_a), dam: (shared_sire, dam_b)}
    result = inbreeding_coefficient(sire, dam, parents, generations=5)
    assert result.coefficient == pytest.approx(0.125)
    assert result.common_ancestors[0].occurrences == 2


def test_parent_offspring_mating_counts_sire_itself_as_ancestor():
    sire, dam, granddam = ids(3)
    parents = {dam: (sire, granddam)}
    result = inbreeding_coefficient(sire, dam, parents, generations=5)
    assert result.coefficient == pytest.approx(0.25)
    assert result.common_ancestors[0].dog_id == sire


def test_first_cousins_give_one_sixteenth():
    sire, dam, sire_father, dam_father, shared_gs, shared_gd, o1, o2 = ids(8)
    parents = {
        sire: (sire_father, o1),
        dam: (dam_father, o2),
        sire_father: (shared_gs, shared_gd),
        dam_father: (shared_gs, shared_gd),
    }
    result = inbreeding_coefficient(sire, dam, parents, generations=5)
    assert result.coefficient == pytest.approx(0.0625)


def test_walk_is_limited_by_generations():
    sire, dam, sire_father, dam_father, shared = ids(5)
    parents = {sire: (sire_father, None), dam: (dam_father, None)}
    parents[sire_father] = (shared, None)
    parents[dam_father] = (shared, None)
    assert inbreeding_coefficient(sire, dam, parents, generations=1).coefficient == 0.0
    assert inbreeding_coefficient(sire, dam, parents, generations=2).coefficient > 0.0


def test_ancestor_paths_skips_unknown_parents():
    dog, sire = ids(2)
    paths = ancestor_paths(dog, {dog: (sire, None)}, generations=3)
    assert paths[dog] == [(dog,)]
    assert paths[sire] == [(dog, sire)]
    assert len(paths) == 2


def test_recommendations_flag_dominant_ancestor_by_name():
    sire, dam, granddam = ids(3)
    result = inbreeding_coefficient(sire, dam, {dam: (sire, granddam)}, generations=3)
    notes = recommendations(result, {sire: "Old Rex"})
    assert notes[0].startswith("Moderate inbreeding")
    assert any("Old Rex" in note for note in notes)


def test_recommendations_for_unrelated_pair():
    sire, dam = ids(2)
    notes = recommendations(inbreeding_coefficient(sire, dam, {}, generations=3), {})
    assert notes[0].startswith("Acceptable")
    assert notes[-1] == "No common ancestors found within the specified generations."
