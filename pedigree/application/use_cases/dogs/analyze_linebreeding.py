from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pedigree.application.errors import ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.lineage import MAX_TREE_GENERATIONS, load_parent, load_parent_links
from pedigree.domain.lineage import LinebreedingResult, inbreeding_coefficient, recommendations
from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.gender import Gender


@dataclass(slots=True)
class LinebreedingAnalysis:
    sire: Dog
    dam: Dog
    generations: int
    result: LinebreedingResult
    ancestors: dict[UUID, Dog]
    recommendations: list[str]


async def execute(
    uow: UnitOfWork, sire_id: UUID, dam_id: UUID, generations: int = 6
) -> LinebreedingAnalysis:
    """Inbreeding coefficient of a prospective sire x dam offspring.

    ``generations`` counts the sire and dam as generation 1, so the walk above
    each of them covers ``generations - 1`` further generations.
    """
    if not 1 <= generations <= MAX_TREE_GENERATIONS:
        raise ValidationError(
            f"generations must be between 1 and {MAX_TREE_GENERATIONS}",
            details={"generations": generations},
        )
    if sire_id == dam_id:
        raise ValidationError("Sire and dam must be different dogs")
    sire = await load_parent(uow, sire_id, Gender.MALE)
    dam = await load_parent(uow, dam_id, Gender.FEMALE)

    depth = generations - 1
    links = await load_parent_links(uow, [sire_id, dam_id], depth)
    result = inbreeding_coefficient(sire_id, dam_id, links, depth)

    common_ids = [item.dog_id for item in result.common_ancestors]
    ancestors = {dog.id: dog for dog in await uow.dogs.get_many(common_ids)}
    names = {dog_id: dog.name for dog_id, dog in ancestors.items()}
    return LinebreedingAnalysis(
        sire=sire,
        dam=dam,
        generations=generations,
        result=result,
        ancestors=ancestors,
        recommendations=recommendations(result, names),
    )
