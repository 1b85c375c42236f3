from fastapi import APIRouter, Depends, status

from iboc.adapters.clock import SystemClock
from iboc.adapters.sqlite.repos import SQLiteSocialProjectRepo
from iboc.api.deps import get_clock, get_social_project_repo, raise_for_errors, require_permission
from iboc.api.schemas import GalleryImagesRequest, SocialProjectRequest
from iboc.components.social import (
    AddGalleryImagesInput,
    DeleteProjectInput,
    RemoveGalleryItemInput,
    SaveProjectInput,
    run_add_gallery_images,
    run_delete,
    run_list,
    run_remove_gallery_item,
    run_save,
)
from iboc.domain.entities import AppUser, SocialProject

router = APIRouter()


@router.get("", response_model=list[SocialProject])
def list_projects(
    _user: AppUser = Depends(require_permission("social:view")),
    repo: SQLiteSocialProjectRepo = Depends(get_social_project_repo),
) -> list[SocialProject]:
    return run_list(repo).projects


@router.post("", response_model=SocialProject, status_code=status.HTTP_201_CREATED)
def create_project(
    req: SocialProjectRequest,
    _user: AppUser = Depends(require_permission("social:edit")),
    repo: SQLiteSocialProjectRepo = Depends(get_social_project_repo),
) -> SocialProject | None:
    result = run_save(SaveProjectInput(project=SocialProject(**req.model_dump())), repo)
    raise_for_errors(result.errors)
    return result.project


@router.put("/{project_id}", response_model=SocialProject)
def update_project(
    project_id: str,
    req: SocialProjectRequest,
    _user: AppUser = Depends(require_permission("social:edit")),
    repo: SQLiteSocialProjectRepo = Depends(get_social_project_repo),
) -> SocialProject | None:
    inp = SaveProjectInput(project=SocialProject(**req.model_dump()), project_id=project_id)
    result = run_save(inp, repo)
    raise_for_errors(result.errors)
    return result.project


@router.delete("/{project_id}")
def delete_project(
    project_id: str,
    _user: AppUser = Depends(require_permission("social:delete")),
    repo: SQLiteSocialProjectRepo = Depends(get_social_project_repo),
) -> dict[str, str]:
    run_delete(DeleteProjectInput(project_id=project_id), repo)
    return {"status": "deleted"}


@router.post("/{project_id}/gallery", response_model=SocialProject)
def add_gallery_images(
    project_id: str,
    req: GalleryImagesRequest,
    _user: AppUser = Depends(require_permission("social:edit")),
    repo: SQLiteSocialProjectRepo = Depends(get_social_project_repo),
    clock: SystemClock = Depends(get_clock),
) -> SocialProject | None:
    """Append already-uploaded images, each with a random verse."""
    inp = AddGalleryImagesInput(project_id=project_id, image_urls=req.image_urls)
    result = run_add_gallery_images(inp, repo, registered_from=clock.epoch_ms())
    raise_for_errors(result.errors)
    return result.project


@router.delete("/{project_id}/gallery/{index}", response_model=SocialProject)
def remove_gallery_item(
    project_id: str,
    index: int,
    _user: AppUser = Depends(require_permission("social:edit")),
    repo: SQLiteSocialProjectRepo = Depends(get_social_project_repo),
) -> SocialProject | None:
    result = run_remove_gallery_item(RemoveGalleryItemInput(project_id=project_id, index=index), repo)
    raise_for_errors(result.errors)
    return result.project
