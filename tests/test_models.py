# tests/test_models.py

from __future__ import annotations

from datetime import datetime

from todolist.models import Task, normalize_status


def test_new_task_defaults(make_task) -> None:
    task = make_task('Buy milk')
    assert task.id is not None
    assert task.completed is False
    assert task.due_date is None
    assert task.dom_id == f'task_{task.id}'


def test_toggle_complete_twice_restores_state(make_task) -> None:
    task = make_task('Walk dog')
    assert task.toggle_complete() is True
    assert task.toggle_complete() is False
    assert task.completed is False


def test_filters_partition_the_full_listing(make_task) -> None:
    done = make_task('Done', completed=True)
    open_a = make_task('Open A')
    open_b = make_task('Open B', completed=False)

    everything = {t.id for t in Task.filtered('all')}
    completed = {t.id for t in Task.filtered('completed')}
    incomplete = {t.id for t in Task.filtered('incomplete')}

    assert completed == {done.id}
    assert incomplete == {open_a.id, open_b.id}
    assert completed | incomplete == everything
    assert not completed & incomplete


def test_listing_is_ordered_by_id(make_task) -> None:
    ids = [make_task(f'Task {n}').id for n in range(3)]
    assert [t.id for t in Task.filtered()] == ids


def test_unknown_status_means_all() -> None:
    assert normalize_status('completed') == 'completed'
    assert normalize_status('bogus') == 'all'
    assert normalize_status(None) == 'all'


def test_to_dict_serializes_dates(make_task) -> None:
    task = make_task('Pay rent', description='Before Friday',
                     due_date=datetime(2026, 11, 1, 9, 30))
    data = task.to_dict()
    assert data['title'] == 'Pay rent'
    assert data['description'] == 'Before Friday'
    assert data['completed'] is False
    assert data['due_date'] == '2026-11-01T09:30:00'
    assert data['created_at'] is not None
