"""
Social component - Social action projects and galleries.
"""

from .component import (
    TITLE_REQUIRED,
    gallery_items,
    newest_items_first,
    run_add_gallery_images,
    run_delete,
    run_list,
    run_remove_gallery_item,
    run_save,
    sort_by_date_desc,
)
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

__all__ = [
    "gallery_items",
    "newest_items_first",
    "run_add_gallery_images",
    "run_delete",
    "run_list",
    "run_remove_gallery_item",
    "run_save",
    "sort_by_date_desc",
    "TITLE_REQUIRED",
    "AddGalleryImagesInput",
    "DeleteProjectInput",
    "ProjectListOutput",
    "ProjectOutput",
    "RemoveGalleryItemInput",
    "SaveProjectInput",
    "ValidationError",
    "ChoicePort",
    "SocialProjectRepoPort",
]
