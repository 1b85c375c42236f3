"""
Social component - Social action projects and their photo galleries.

Every gallery image gets a verse drawn from the social-action verse list.
"""

import random
from collections.abc import Sequence

from iboc.domain.defaults import SOCIAL_ACTION_VERSES
from iboc.domain.entities import SocialProject, SocialProjectItem

from .models import (
    AddGalleryImagesInput,
    DeleteProjectInput,
    ProjectListOutput,
    ProjectOutput,
    RemoveGalleryItemInput,
    SaveProjectInput,
    ValidationError,
)
from .ports import ChoicePort, SocialProjectRepoPort

TITLE_REQUIRED = "Título é obrigatório"
PROJECT_NOT_FOUND = "Projeto não encontrado."
GALLERY_INDEX_INVALID = "Imagem da galeria inválida."


def sort_by_date_desc(projects: list[SocialProject]) -> list[SocialProject]:
    return sorted(projects, key=lambda p: p.date, reverse=True)


def newest_items_first(items: list[SocialProjectItem]) -> list[SocialProjectItem]:
    return sorted(items, key=lambda i: i.registered_at or 0, reverse=True)


def gallery_items(
    image_urls: Sequence[str],
    rng: ChoicePort | None = None,
    registered_from: int | None = None,
) -> list[SocialProjectItem]:
    """
    Wrap uploaded image URLs as gallery items with a random verse each.

    When registered_from is given, items are stamped registered_from,
    registered_from + 1, ... so every stamp is unique and increasing.
    """
    picker = rng or random
    items = []
    for index, url in enumerate(image_urls):
        text, reference = picker.choice(SOCIAL_ACTION_VERSES)
        items.append(
            SocialProjectItem(
                image_url=url,
                verse=text,
                verse_reference=reference,
                registered_at=None if registered_from is None else registered_from + index,
            )
        )
    return items


def _failure(field_name: str, code: str, message: str) -> ProjectOutput:
    return ProjectOutput(
        success=False, errors=[ValidationError(field=field_name, code=code, message=message)]
    )


def run_list(repo: SocialProjectRepoPort) -> ProjectListOutput:
    return ProjectListOutput(projects=sort_by_date_desc(repo.list_all()))


def run_save(inp: SaveProjectInput, repo: SocialProjectRepoPort) -> ProjectOutput:
    if not inp.project.title or not inp.project.title.strip():
        return _failure("title", "required", TITLE_REQUIRED)

    project = inp.project.model_copy(update={"title": inp.project.title.strip()})
    if inp.project_id is not None:
        if not repo.get_by_id(inp.project_id):
            return _failure("id", "not_found", PROJECT_NOT_FOUND)
        project = project.model_copy(update={"id": inp.project_id})

    return ProjectOutput(project=repo.save(project), success=True)


def run_delete(inp: DeleteProjectInput, repo: SocialProjectRepoPort) -> ProjectOutput:
    repo.delete(inp.project_id)
    return ProjectOutput(success=True)


def run_add_gallery_images(
    inp: AddGalleryImagesInput,
    repo: SocialProjectRepoPort,
    rng: ChoicePort | None = None,
    registered_from: int | None = None,
) -> ProjectOutput:
    project = repo.get_by_id(inp.project_id)
    if not project:
        return _failure("project_id", "not_found", PROJECT_NOT_FOUND)

    project.gallery = [*project.gallery, *gallery_items(inp.image_urls, rng, registered_from)]
    return ProjectOutput(project=repo.save(project), success=True)


def run_remove_gallery_item(
    inp: RemoveGalleryItemInput, repo: SocialProjectRepoPort
) -> ProjectOutput:
    project = repo.get_by_id(inp.project_id)
    if not project:
        return _failure("project_id", "not_found", PROJECT_NOT_FOUND)

    if not 0 <= inp.index < len(project.gallery):
        return _failure("index", "out_of_range", GALLERY_INDEX_INVALID)

    project.gallery = [item for i, item in enumerate(project.gallery) if i != inp.index]
    return ProjectOutput(project=repo.save(project), success=True)
