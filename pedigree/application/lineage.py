from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from uuid import UUID

from pedigree.application.errors import ConflictError, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.gender import Gender

MAX_TREE_GENERATIONS = 10


@dataclass(slots=True)
class PedigreeNode:
    dog: Dog
    generation: int
    sire: PedigreeNode | None = None
    dam: PedigreeNode | None = None


async def load_parent_links(
    uow: UnitOfWork, roots: Iterable[UUID], generations: int
) -> dict[UUID, tuple[UUID | None, UUID | None]]:
    """Fetch sire/dam links for ``roots`` and their ancestors, one query per generation."""
    links: dict[UUID, tuple[UUID | None, UUID | None]] = {}
    frontier = set(roots)
    for _ in range(generations):
        if not frontier:
            break
        batch = await uow.dogs.get_parent_links(frontier)
        links.update(batch)
        frontier = {
            parent_id
            for pair in batch.values()
            for parent_id in pair
            if parent_id is not None and parent_id not in links
        }
    return links


async def ensure_not_descendant(
    uow: UnitOfWork, dog_id: UUID, candidates: Iterable[UUID], max_generations: int
) -> None:
    """Reject a parent assignment that would make ``dog_id`` its own ancestor.

    Walks upward from each candidate parent. Meeting ``dog_id`` means the candidate
    descends from it. A chain that still has recorded parents after ``max_generations``
    cannot be verified and is rejected as well; one that ends in founders is accepted.
    """
    frontier = {candidate for candidate in candidates if candidate is not None}
    if dog_id in frontier:
        raise ConflictError("A dog cannot be its own parent", details={"dog_id": str(dog_id)})
    seen = set(frontier)
    for _ in range(max_generations):
        if not frontier:
            return
        frontier = await _parents_of(uow, dog_id, frontier, seen)
    if frontier and await _parents_of(uow, dog_id, frontier, seen):
        raise ConflictError(
            f"Ancestry exceeds {max_generations} generations; cannot verify parent assignment",
            details={"dog_id": str(dog_id)},
        )


async def _parents_of(
    uow: UnitOfWork, dog_id: UUID, frontier: set[UUID], seen: set[UUID]
) -> set[UUID]:
    batch = await uow.dogs.get_parent_links(frontier)
    next_frontier: set[UUID] = set()
    for pair in batch.values():
        for parent_id in pair:
            if parent_id is None:
                continue
            if parent_id == dog_id:
                raise ConflictError(
                    "Parent assignment would create a cycle in the pedigree",
                    details={"dog_id": str(dog_id)},
                )
            if parent_id not in seen:
                seen.add(parent_id)
                next_frontier.add(parent_id)
    return next_frontier


async def load_parent(uow: UnitOfWork, parent_id: UUID, expected: Gender) -> Dog:
    label = "Sire" if expected is Gender.MALE else "Dam"
    parent = await uow.dogs.get(parent_id)
    if not parent:
        raise NotFound(f"{label} not found", details={"id": str(parent_id)})
    if parent.gender is not expected:
        raise ValidationError(
            f"{label} must be {expected.value.lower()}",
            details={"id": str(parent_id), "gender": parent.gender.value},
        )
    return parent


async def ensure_valid_parents(
    uow: UnitOfWork,
    *,
    dog_id: UUID | None,
    sire_id: UUID | None,
    dam_id: UUID | None,
    max_generations: int,
) -> None:
    """Check existence, gender and acyclicity of a prospective sire/dam.

    ``dog_id`` is None for a dog that does not exist yet; such a dog has no
    descendants, so the ancestry walk is skipped.
    """
    if sire_id is not None and sire_id == dam_id:
        raise ValidationError("Sire and dam must be different dogs")
    if dog_id is not None and dog_id in (sire_id, dam_id):
        raise ConflictError("A dog cannot be its own parent", details={"dog_id": str(dog_id)})
    if sire_id is not None:
        await load_parent(uow, sire_id, Gender.MALE)
    if dam_id is not None:
        await load_parent(uow, dam_id, Gender.FEMALE)
    if dog_id is not None:
        await ensure_not_descendant(
            uow, dog_id, [p for p in (sire_id, dam_id) if p is not None], max_generations
        )


async def build_pedigree(uow: UnitOfWork, dog_id: UUID, generations: int) -> PedigreeNode:
    root = await uow.dogs.get(dog_id)
    if not root:
        raise NotFound("Dog not found")
    links = await load_parent_links(uow, [dog_id], generations - 1)
    ancestor_ids = {p for pair in links.values() for p in pair if p is not None}
    dogs = {dog.id: dog for dog in await uow.dogs.get_many(ancestor_ids)} if ancestor_ids else {}
    dogs[root.id] = root

    def expand(dog: Dog, generation: int, lineage: frozenset[UUID]) -> PedigreeNode:
        node = PedigreeNode(dog=dog, generation=generation)
        if generation >= generations:
            return node
        for attr, parent_id in (("sire", dog.sire_id), ("dam", dog.dam_id)):
            parent = dogs.get(parent_id) if parent_id else None
            if parent is not None and parent.id not in lineage:
                setattr(node, attr, expand(parent, generation + 1, lineage | {parent.id}))
        return node

    return expand(root, 1, frozenset({root.id}))
