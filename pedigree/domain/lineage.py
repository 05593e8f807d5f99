"""Pure pedigree computations over an in-memory map of parent links.

``parents`` maps a dog id to its ``(sire_id, dam_id)`` pair; missing keys and
``None`` entries are unknown parents. Callers load the map one generation at a
time through the dogs repository.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from uuid import UUID

ParentLinks = Mapping[UUID, tuple[UUID | None, UUID | None]]
Path = tuple[UUID, ...]

HIGH_INBREEDING = 0.25
MODERATE_INBREEDING = 0.125
DOMINANT_CONTRIBUTION = 0.2


@dataclass(slots=True)
class CommonAncestor:
    dog_id: UUID
    sire_paths: list[Path]
    dam_paths: list[Path]
    contribution: float = 0.0

    @property
    def occurrences(self) -> int:
        return len(self.sire_paths) + len(self.dam_paths)


@dataclass(slots=True)
class LinebreedingResult:
    coefficient: float
    common_ancestors: list[CommonAncestor] = field(default_factory=list)

    @property
    def genetic_diversity(self) -> float:
        return max(0.0, 1.0 - self.coefficient)


def ancestor_paths(start: UUID, parents: ParentLinks, generations: int) -> dict[UUID, list[Path]]:
    """Every path from ``start`` up to each ancestor within ``generations``.

    ``start`` itself is included with the single path ``(start,)`` at depth 0.
    """
    paths: dict[UUID, list[Path]] = {start: [(start,)]}
    frontier: list[Path] = [(start,)]
    for _ in range(generations):
        next_frontier: list[Path] = []
        for path in frontier:
            for parent_id in parents.get(path[-1], (None, None)):
                if parent_id is None or parent_id in path:
                    continue
                extended = path + (parent_id,)
                paths.setdefault(parent_id, []).append(extended)
                next_frontier.append(extended)
        frontier = next_frontier
        if not frontier:
            break
    return paths


def inbreeding_coefficient(
    sire_id: UUID, dam_id: UUID, parents: ParentLinks, generations: int
) -> LinebreedingResult:
    """Wright's coefficient of inbreeding for a prospective offspring of sire x dam.

    F = sum over common ancestors A, and over each pair of paths sire..A / dam..A
    that meet only at A, of (1/2) ** (n1 + n2 + 1), where n1 and n2 count the
    generations from the sire and the dam up to A.
    """
    sire_side = ancestor_paths(sire_id, parents, generations)
    dam_side = ancestor_paths(dam_id, parents, generations)

    common: list[CommonAncestor] = []
    total = 0.0
    for ancestor_id, sire_paths in sire_side.items():
        dam_paths = dam_side.get(ancestor_id)
        if not dam_paths:
            continue
        contribution = 0.0
        for left in sire_paths:
            left_nodes = set(left[:-1])
            for right in dam_paths:
                if left_nodes.intersection(right[:-1]):
                    continue
                contribution += 0.5 ** ((len(left) - 1) + (len(right) - 1) + 1)
        if contribution == 0.0:
            continue
        common.append(
            CommonAncestor(
                dog_id=ancestor_id,
                sire_paths=sire_paths,
                dam_paths=dam_paths,
                contribution=contribution,
            )
        )
        total += contribution

    common.sort(key=lambda item: item.contribution, reverse=True)
    return LinebreedingResult(coefficient=total, common_ancestors=common)


def recommendations(result: LinebreedingResult, names: Mapping[UUID, str]) -> list[str]:
    notes: list[str] = []
    if result.coefficient > HIGH_INBREEDING:
        notes.append("High inbreeding coefficient detected. Consider a different breeding pair.")
    elif result.coefficient > MODERATE_INBREEDING:
        notes.append(
            "Moderate inbreeding coefficient. Proceed with caution and monitor for health issues."
        )
    else:
        notes.append(
            "Acceptable inbreeding coefficient. This breeding pair appears genetically diverse."
        )

    if result.common_ancestors:
        notes.append(f"Found {len(result.common_ancestors)} common ancestors in the pedigree.")
        top = result.common_ancestors[0]
        if top.contribution > DOMINANT_CONTRIBUTION:
            name = names.get(top.dog_id, str(top.dog_id))
            notes.append(
                f"{name} has a high genetic contribution ({top.contribution * 100:.1f}%). "
                "Consider potential impact on offspring."
            )
    else:
        notes.append("No common ancestors found within the specified generations.")
    return notes
