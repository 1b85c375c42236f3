from datetime import date
from unittest.mock import Mock

import pytest

from iboc.components.social import (
    AddGalleryImagesInput,
    RemoveGalleryItemInput,
    SaveProjectInput,
    gallery_items,
    newest_items_first,
    run_add_gallery_images,
    run_list,
    run_remove_gallery_item,
    run_save,
)
from iboc.domain.defaults import SOCIAL_ACTION_VERSES
from iboc.domain.entities import SocialProject, SocialProjectItem


@pytest.fixture
def mock_repo():
    repo = Mock()
    repo.save.side_effect = lambda p: p
    return repo


@pytest.fixture
def rng():
    """Always picks the first verse."""
    r = Mock()
    r.choice.side_effect = lambda seq: seq[0]
    return r


def _item(url, registered_at=None):
    return SocialProjectItem(image_url=url, verse="v", verse_reference="r", registered_at=registered_at)


def test_list_newest_first(mock_repo):
    mock_repo.list_all.return_value = [
        SocialProject(title="Antigo", date=date(2025, 5, 1)),
        SocialProject(title="Recente", date=date(2026, 2, 1)),
    ]

    assert [p.title for p in run_list(mock_repo).projects] == ["Recente", "Antigo"]


def test_save_requires_title(mock_repo):
    result = run_save(SaveProjectInput(SocialProject(title=" ", date=date(2026, 1, 1))), mock_repo)

    assert result.success is False
    assert result.errors[0].message == "Título é obrigatório"


def test_update_missing_project(mock_repo):
    mock_repo.get_by_id.return_value = None

    result = run_save(
        SaveProjectInput(SocialProject(title="Sopão", date=date(2026, 1, 1)), project_id="p9"),
        mock_repo,
    )

    assert result.errors[0].code == "not_found"


def test_gallery_items_get_verses_and_stamps(rng):
    items = gallery_items(["a.jpg", "b.jpg"], rng, registered_from=1000)

    text, reference = SOCIAL_ACTION_VERSES[0]
    assert [i.image_url for i in items] == ["a.jpg", "b.jpg"]
    assert all(i.verse == text and i.verse_reference == reference for i in items)
    assert [i.registered_at for i in items] == [1000, 1001]


def test_gallery_items_pick_from_verse_list():
    items = gallery_items(["a.jpg"])

    assert (items[0].verse, items[0].verse_reference) in SOCIAL_ACTION_VERSES
    assert items[0].registered_at is None


def test_add_gallery_images_appends(mock_repo, rng):
    project = SocialProject(id="p1", title="Sopão", date=date(2026, 1, 1), gallery=[_item("old.jpg", 5)])
    mock_repo.get_by_id.return_value = project

    result = run_add_gallery_images(
        AddGalleryImagesInput("p1", ["new.jpg"]), mock_repo, rng, registered_from=10
    )

    assert [i.image_url for i in result.project.gallery] == ["old.jpg", "new.jpg"]
    assert [i.image_url for i in newest_items_first(result.project.gallery)] == ["new.jpg", "old.jpg"]


def test_remove_gallery_item(mock_repo):
    project = SocialProject(
        id="p1", title="Sopão", date=date(2026, 1, 1), gallery=[_item("a.jpg"), _item("b.jpg")]
    )
    mock_repo.get_by_id.return_value = project

    result = run_remove_gallery_item(RemoveGalleryItemInput("p1", 1), mock_repo)
    assert [i.image_url for i in result.project.gallery] == ["a.jpg"]

    result = run_remove_gallery_item(RemoveGalleryItemInput("p1", -1), mock_repo)
    assert result.errors[0].code == "out_of_range"
